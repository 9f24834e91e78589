"""Web layer: FastAPI app and Slack webhook routes."""
