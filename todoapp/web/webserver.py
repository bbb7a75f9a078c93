"""
Flask web server for the todo service.
Provides:
- The To-Do REST API (mounted under the configured API prefix)
- A liveness endpoint for monitoring
"""

from flask import Flask, jsonify
import logging

from todoapp.apps.todo import create_todo_blueprint
from todoapp.apps.todo.models import utc_timestamp


class TodoWebServer:
    """
    Web server exposing the todo collection over HTTP
    """

    def __init__(self, service, config):
        """
        Initialize web server

        Args:
            service: TodoService shared by every todo route
            config: Config instance
        """
        self.logger = logging.getLogger(__name__)
        self.service = service
        self.host = config.get('server.host', '0.0.0.0')
        self.port = config.get('server.port', 3000)
        self.threaded = config.get('server.threaded', True)
        self.api_prefix = (config.get('server.api_prefix') or '').rstrip('/')
        self.service_name = config.get('service.name', 'aiops-demo-todo-app')
        self.version = str(config.get('service.version', '1.0.0'))

        self.flask_app = Flask(__name__)
        self.flask_app.json.sort_keys = False

        self._setup_routes()

    def _setup_routes(self):
        """Setup Flask routes"""

        self.flask_app.register_blueprint(
            create_todo_blueprint(self.service),
            url_prefix=self.api_prefix or None
        )

        def health():
            """Liveness check"""
            return jsonify({
                'status': 'healthy',
                'service': self.service_name,
                'version': self.version,
                'timestamp': utc_timestamp(),
            })

        self.flask_app.add_url_rule('/health', 'health', health)
        if self.api_prefix:
            self.flask_app.add_url_rule(f'{self.api_prefix}/health', 'api_health', health)

    def run(self):
        """Run the server in the foreground until interrupted"""
        self.logger.info(f"Todo API available at http://{self.host}:{self.port}{self.api_prefix}/todos")
        self.flask_app.run(host=self.host, port=self.port, threaded=self.threaded,
                           debug=False, use_reloader=False)
