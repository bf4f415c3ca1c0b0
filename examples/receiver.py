"""Minimal webhook receiver that verifies QStash signatures.

Set QSTASH_CURRENT_SIGNING_KEY and QSTASH_NEXT_SIGNING_KEY, deploy behind a
public URL and publish to it.
"""

import os
from http.server import BaseHTTPRequestHandler, HTTPServer

import structlog

from qstash_client import Receiver, SignatureError, configure_logging

logger = structlog.get_logger("receiver")

receiver = Receiver.from_settings()

# Set when running behind a proxy so the signed URL matches
PUBLIC_URL = os.environ.get("PUBLIC_URL", "")


class QStashHandler(BaseHTTPRequestHandler):
    """Handle QStash webhook requests."""

    def log_message(self, format, *args):
        """Suppress default logging."""
        pass

    def _reply(self, status: int, text: bytes):
        self.send_response(status)
        self.end_headers()
        self.wfile.write(text)

    def do_POST(self):
        content_length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(content_length)

        signature = self.headers.get("Upstash-Signature", "")
        url = f"{PUBLIC_URL}{self.path}" if PUBLIC_URL else None
        try:
            receiver.verify(signature, body, url=url, clock_tolerance=5)
        except SignatureError:
            self._reply(401, b"Invalid signature")
            return

        logger.info(
            "delivery_received",
            message_id=self.headers.get("Upstash-Message-Id"),
            retried=self.headers.get("Upstash-Retried", "0"),
            size=len(body),
        )
        self._reply(200, b"OK")

    def do_GET(self):
        """Health check endpoint."""
        if self.path == "/health":
            self._reply(200, b"OK")
        else:
            self._reply(404, b"")


def main():
    configure_logging()
    port = int(os.environ.get("PORT", 8080))
    server = HTTPServer(("0.0.0.0", port), QStashHandler)
    logger.info("receiver_listening", port=port)
    server.serve_forever()


if __name__ == "__main__":
    main()
