"""Abstract interfaces for the collaborators around the engine.

These ABCs define the contract that external implementations must fulfil.
The engine itself never performs I/O; the tracker calls through these
interfaces and the boundary layer supplies concrete adapters (an HTTP
prediction client, a webhook alert sink, ...).

Typical integration flow::

    orchestrator = RiskEscalationOrchestrator(PhaseAdvisor(store))
    tracker = EpisodeTracker(
        orchestrator,
        predictor=MyPredictionService(...),
        alert_sink=MyAlertSink(...),
    )

    episode = tracker.start_episode("patient-1")
    status = await tracker.log_reading(episode, SymptomReading(temperature_f=101.2))
    # status.severity_band, status.danger_signs, status.alert_recommended, ...
"""

from abc import ABC, abstractmethod

from fever_engine.models.alert import AlertEvent
from fever_engine.models.prediction import PredictionRequest, PredictionResult


class PredictionService(ABC):
    """Interface for the external disease classifier.

    Implementations receive the flattened 0/1 feature body built from a
    snapshot and the episode history, and return the classifier's label,
    confidence, ranked alternatives and urgency.
    """

    @abstractmethod
    async def predict(self, request: PredictionRequest) -> PredictionResult:
        """Score one reading.

        Parameters
        ----------
        request:
            Feature body for the classifier (temperature, fever days,
            symptom flags, platelet count, exposure flags).

        Returns
        -------
        PredictionResult
            Disease label, confidence, up to three alternatives and an
            optional urgency tier.

        Raises
        ------
        PredictionError
            If the service cannot be reached or replies with a payload
            that does not match the contract.
        """
        ...


class AlertSink(ABC):
    """Interface for alert delivery.

    The engine decides *whether* an update is alert-worthy; a sink decides
    *how* the alert reaches clinicians (queue, pub/sub, webhook, ...).
    """

    @abstractmethod
    async def publish(self, event: AlertEvent) -> None:
        """Deliver one alert event.  Failures propagate to the caller."""
        ...
