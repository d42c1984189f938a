import os

# Dummy settings so `main` can be imported; no real credentials are read in tests.
os.environ.setdefault("SERVICE_ACCOUNT", "test-service-account.json")
os.environ.setdefault("MAIL", "relay@example.com")
os.environ.setdefault("PASSWORD", "dummy-password")
os.environ.setdefault("CORS_ORIGIN", "https://localhost")
