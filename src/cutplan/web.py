#!/usr/bin/env python3
"""Web server entry point"""


def run_server(host="0.0.0.0", port=8000):
    """Start the web server"""
    import uvicorn
    from .web_app.server import app

    print("Starting Cutplan Web Server...")
    print(f"API docs at http://localhost:{port}/docs")
    uvicorn.run(app, host=host, port=port)
