import os
from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv(usecwd=True))


class ServerConfig:
    def __init__(self) -> None:
        self.host = os.getenv("FLIPMOVE_SERVER_HOST", "127.0.0.1")
        self.port = int(os.getenv("FLIPMOVE_SERVER_PORT", "8080"))


def get_log_level() -> str:
    return os.getenv("FLIPMOVE_LOG_LEVEL", "INFO").upper()
