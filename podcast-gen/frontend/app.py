import logging
import os

from frontend.api_client import GENERATE_PODCAST_URL
from frontend.ui_components import build_ui

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

demo = build_ui()

if __name__ == "__main__":
    logger.info(f"Connecting to Backend API at: {GENERATE_PODCAST_URL}")
    demo.queue().launch(
        server_name=os.getenv("GRADIO_SERVER_NAME", "0.0.0.0"),
        server_port=int(os.getenv("GRADIO_SERVER_PORT", "7860")),
    )
