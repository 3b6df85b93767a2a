import os

# Deterministic, offline-friendly tests
os.environ["LANGFUSE_ENABLED"] = "0"
os.environ.pop("ASK_AI_WEBHOOK_URL", None)
os.environ.pop("VITE_ASK_AI_WEBHOOK_URL", None)
