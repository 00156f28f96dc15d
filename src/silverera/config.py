import os

from dotenv import load_dotenv

# Load from .env if it exists (useful for local development)
load_dotenv()

# Relay that holds the real provider key; the client sends no credential to it.
PROXY_BASE_URL = os.getenv("SILVERERA_PROXY_URL", "https://silverera-api.lz-t.top")

# Direct provider (OpenAI-compatible paths)
DIRECT_BASE_URL = os.getenv("ZHIPU_BASE_URL", "https://open.bigmodel.cn/api/paas/v4")
DIRECT_API_KEY_ENV = "ZHIPU_API_KEY"

CHAT_MODEL = "glm-4-flash"
VISION_MODEL = "glm-4.1V-Thinking-Flash"
IMAGE_MODEL = "cogview-3-flash"
DEFAULT_IMAGE_SIZE = "1024x1024"
# "You are an image analysis expert"
DEFAULT_VISION_SYSTEM_PROMPT = "你是一个图像分析专家"

LOGGING_LEVEL = os.getenv("LOGGING_LEVEL", "INFO").upper() or "INFO"
