import os
import sys
import logging

from video_summarizer.config import config

logging_str = "[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s"
logging_dir = os.path.join(config.BASE_DIR, "logs")
logging_path = os.path.join(logging_dir, "videosummarizer.log")
if not os.path.exists(logging_dir):
    os.makedirs(logging_dir)
logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format=logging_str,
    handlers=[
        logging.FileHandler(logging_path),
        logging.StreamHandler(sys.stdout)
    ]
)

logging = logging.getLogger('videosummarizer')
