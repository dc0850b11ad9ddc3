import os

# Deterministic key so utils.crypto can be imported during test runs.
os.environ.setdefault("CRYPTOPAN_KEY", bytes(range(32)).hex())
os.environ.setdefault("CRYPTOPAN_KEY_ENCODING", "hex")
