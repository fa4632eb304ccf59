import logging

import uvicorn

from reportpager.core.config import settings


def main() -> None:
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    uvicorn.run("reportpager.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
