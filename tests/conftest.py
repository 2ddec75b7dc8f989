"""Test configuration and fixtures."""

import logfire

# App and SQLAlchemy instrumentation need a configured logfire; keep it local
logfire.configure(send_to_logfire=False, console=False)
