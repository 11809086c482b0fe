import os

from dotenv import load_dotenv

load_dotenv()

JOBS_URL = os.getenv("JOBS_URL", "https://jsonfakery.com/jobs")
JOBS_CACHE_KEY = os.getenv("JOBS_CACHE_KEY", "jobs")
JOBS_CACHE_DIR = os.getenv("JOBS_CACHE_DIR", ".jobfeed")

REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))  # seconds

LOG_DIR = os.getenv("LOG_DIR", ".")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
