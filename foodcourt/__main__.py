import socket

import uvicorn

from foodcourt.core.config import settings
from foodcourt.core.logging import configure_logging, logger


def get_local_ip() -> str:
    # connect() em socket UDP não envia pacotes, só escolhe a interface de saída
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(("10.255.255.255", 1))
            return sock.getsockname()[0]
    except OSError:
        return "localhost"


def main() -> None:
    configure_logging()
    local_ip = get_local_ip()
    logger.info("Food Court Server Running!")
    logger.info("Local:    http://localhost:%s", settings.PORT)
    logger.info("Network:  http://%s:%s", local_ip, settings.PORT)
    logger.info("API docs: http://%s:%s/docs", local_ip, settings.PORT)
    uvicorn.run("foodcourt.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
