from lingocards.services.webhook.client import AnalysisWebhookClient, WebhookResult
from lingocards.services.webhook.normalizer import normalize_analysis

__all__ = ["AnalysisWebhookClient", "WebhookResult", "normalize_analysis"]
