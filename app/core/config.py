import os

# ✅ Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE")  # e.g. logs/job_matcher.log; unset logs to stdout only

# ✅ CORS
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# ✅ ATS proxy
ATS_PROXY_BASE_URL = os.getenv("ATS_PROXY_BASE_URL", "https://jobber.mihir.ch")
ATS_PROXY_TIMEOUT = float(os.getenv("ATS_PROXY_TIMEOUT", "5.0"))

# ✅ Matching criteria (optional YAML override of the built-in tables)
MATCHER_CONFIG_PATH = os.getenv("MATCHER_CONFIG_PATH")
