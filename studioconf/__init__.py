from studioconf.logger import configure_structlog

# Route package logs into stdlib logging; handlers are left to the application
configure_structlog()
