import os

APP_TITLE = "LingoCards"
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000/api/v1")
REQUEST_TIMEOUT = int(os.getenv("API_TIMEOUT", "10"))
# The analyze call waits for the AI workflow
ANALYZE_TIMEOUT = int(os.getenv("API_ANALYZE_TIMEOUT", "60"))
