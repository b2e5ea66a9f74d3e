#!/usr/bin/env python3
"""
Python-based startup script for the Trolling Spread Advisor API.
"""

import os
import sys
import subprocess

from dotenv import load_dotenv


def main():
    """Main entry point."""
    print("=" * 60)
    print("Trolling Spread Advisor API Server")
    print("=" * 60)

    load_dotenv()

    # Configuration
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    workers = int(os.getenv("WORKERS", "1"))
    catalog_path = os.getenv("TROLLINT_CATALOG_PATH", "")
    auth_enabled = bool(os.getenv("TROLLINT_AUTH_USERS") and os.getenv("TROLLINT_AUTH_PASSWORD"))

    print(f"\nConfiguration:")
    print(f"  Host: {host}")
    print(f"  Port: {port}")
    print(f"  Workers: {workers}")
    print(f"  Catalog: {catalog_path or 'none (catalog must be sent with each request)'}")
    print(f"  Basic Auth: {'Yes' if auth_enabled else 'No'}")
    print(f"  Log level: {os.getenv('TROLLINT_LOG_LEVEL', 'INFO')}")

    print(f"\nAPI Documentation: http://localhost:{port}/docs")
    print("=" * 60)

    cmd = [
        sys.executable, "-m", "uvicorn",
        "app:app",
        "--host", host,
        "--port", str(port),
    ]

    if workers == 1:
        cmd.append("--reload")
    else:
        cmd.extend(["--workers", str(workers)])

    try:
        subprocess.run(cmd)
    except KeyboardInterrupt:
        print("\n\nShutting down server...")
        sys.exit(0)


if __name__ == "__main__":
    main()
