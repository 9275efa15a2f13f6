"""fever_server — FastAPI REST API for the fever-episode engine.

Exposes the EpisodeTracker as an HTTP API with episode lifecycle, reading
submission and trend / day-detail / latest views.
"""
