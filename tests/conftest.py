"""Test configuration and fixtures."""

import logfire

# Keep spans local: no console output, nothing sent
logfire.configure(send_to_logfire=False, console=False)
