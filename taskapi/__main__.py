# taskapi/__main__.py
import uvicorn

from taskapi.config import load_settings


def main() -> None:
    settings = load_settings()
    uvicorn.run("taskapi.main:app", host="0.0.0.0", port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()
