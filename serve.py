#!/usr/bin/env python3
"""Run the HTTP API.

Usage:
    python serve.py                        # http://127.0.0.1:5000
    python serve.py --host 0.0.0.0 --port 8080
    python serve.py --debug
"""

import argparse

from llmo_content.web import create_app


def main():
    parser = argparse.ArgumentParser(description="Serve the content generation API")
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    parser.add_argument("--port", type=int, default=5000, help="Port to listen on")
    parser.add_argument("--debug", action="store_true", help="Enable the Flask debugger and reloader")
    args = parser.parse_args()

    # Fails here if ANTHROPIC_API_KEY is missing
    app = create_app()
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
