from lingocards.config import Settings
from lingocards.services.webhook.client import AnalysisWebhookClient


def make_webhook_client(settings: Settings) -> AnalysisWebhookClient:
    """Build the analysis webhook client from settings."""
    return AnalysisWebhookClient(timeout=settings.webhook.timeout_seconds)
