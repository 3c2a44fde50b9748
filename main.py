import uvicorn

from notification_service.config import get_settings
from notification_service.logging_config import configure_logging
from notification_service.main import create_app

settings = get_settings()
configure_logging(settings.log_level)

app = create_app(settings)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
