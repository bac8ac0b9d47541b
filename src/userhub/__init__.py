"""UserHub - user management service."""
