"""
Todo service - Main Application
In-memory todo list exposed over HTTP/JSON
"""

import sys
import os
import logging
from logging.handlers import RotatingFileHandler

from todoapp.config import Config
from todoapp.apps.todo import TodoService, TodoStore
from todoapp.web.webserver import TodoWebServer


DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), '../config/config.yaml')

_SIZE_UNITS = {'KB': 1024, 'MB': 1024 ** 2, 'GB': 1024 ** 3}


def parse_size(value) -> int:
    """Convert sizes such as '10MB', '512KB' or 2048 into bytes"""
    if isinstance(value, int):
        return value

    text = str(value).strip().upper()
    for suffix, factor in _SIZE_UNITS.items():
        if text.endswith(suffix):
            return int(float(text[:-len(suffix)].strip()) * factor)
    if text.endswith('B'):
        text = text[:-1]
    return int(text)


class TodoApp:
    """
    Main todo service application
    """

    def __init__(self, config):
        """
        Initialize application

        Args:
            config: Config instance or path to config.yaml
        """
        # Load configuration
        self.config = config if isinstance(config, Config) else Config(config)

        # Setup logging
        self._setup_logging()
        self.logger = logging.getLogger(__name__)
        self.logger.info("=" * 50)
        self.logger.info(f"{self.config.get('service.name')} starting...")
        self.logger.info("=" * 50)

        # The store is created exactly once and shared by every request
        self.store = TodoStore()
        if self.config.get('todos.seed', True):
            self.store.seed()

        self.service = TodoService(self.store)
        self.web_server = TodoWebServer(self.service, self.config)

    @property
    def flask_app(self):
        return self.web_server.flask_app

    def _setup_logging(self):
        """Configure logging"""
        log_level = getattr(logging, str(self.config.get('logging.level', 'INFO')).upper(), logging.INFO)
        log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

        handlers = []

        # Console handler
        if self.config.get('logging.console', True):
            handlers.append(logging.StreamHandler())

        # File handler
        log_file = self.config.get('logging.file')
        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            handlers.append(RotatingFileHandler(
                log_file,
                maxBytes=parse_size(self.config.get('logging.max_size', '1MB')),
                backupCount=self.config.get('logging.backup_count', 3)
            ))

        logging.basicConfig(
            level=log_level,
            format=log_format,
            handlers=handlers or [logging.NullHandler()]
        )

    def start(self):
        """Start the application"""
        try:
            self.web_server.run()
        except KeyboardInterrupt:
            self.logger.info("Interrupted by user")
        finally:
            self.logger.info("Todo service stopped")


def main():
    """Main entry point"""
    # Determine config path
    if len(sys.argv) > 1:
        config_path = sys.argv[1]
    else:
        config_path = os.environ.get('TODOAPP_CONFIG', DEFAULT_CONFIG_PATH)

    # Ensure config exists
    if not os.path.exists(config_path):
        print(f"ERROR: Configuration file not found: {config_path}")
        print("Usage: todoapp [config_path]")
        sys.exit(1)

    # Create and start application
    app = TodoApp(config_path)
    app.start()


if __name__ == '__main__':
    main()
