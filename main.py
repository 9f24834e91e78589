"""Entry point: run the Slack events webhook server."""

import uvicorn

from livebot.adapters.web.server import app
from livebot.config import CONFIG

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=CONFIG["port"], log_level="info")
