"""Serve a message over HTTP.

    python examples/sample02.py "Hi there" --port 8080

Values in examples/sample02.config.json apply when not given on the command line.
"""
import logging
import os
from http.server import BaseHTTPRequestHandler, HTTPServer

from clopts import parse_or_exit
from clopts.console import console
from clopts.utils import setup_logging

setup_logging(mode="cli", console_log_level=logging.INFO)

clopts = parse_or_exit(
    {
        "message": {
            "value": "Hello World.",
            "required": False,
            "entry": 1,
            "description": "Sample run server.",
        },
        "port": {
            "value": int(os.environ.get("PORT", 3000)),
            "description": "Sample port number.",
        },
    }
).set_config_file("examples/sample02.config.json")

port = clopts.get("port")
message = clopts.get("message")


class MessageHandler(BaseHTTPRequestHandler):
    def do_GET(self):
        body = message.encode("UTF-8")
        self.send_response(200)
        self.send_header("Content-Type", "text/plain")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)


console.print(f"Server running. http://localhost:{port}")
HTTPServer(("", port), MessageHandler).serve_forever()
