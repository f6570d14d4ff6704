import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev")
    ENV = os.getenv("ENV", "development")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    RATE_LIMIT_PER_MINUTE = int(os.getenv("RATE_LIMIT_PER_MINUTE", "120"))
    # Upper bound for the number base converter; default is 2**53 - 1
    MAX_CONVERT_VALUE = int(os.getenv("MAX_CONVERT_VALUE", str(2 ** 53 - 1)))
