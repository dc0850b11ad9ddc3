import os
from dotenv import load_dotenv  # type:ignore

# Load the env
load_dotenv()

# Master key for the prefix-preserving engine, 32 bytes once decoded.
CRYPTOPAN_KEY = os.getenv("CRYPTOPAN_KEY")                                # export CRYPTOPAN_KEY="<64 hex chars>"
CRYPTOPAN_KEY_ENCODING = os.getenv("CRYPTOPAN_KEY_ENCODING", "hex")       # "hex" or "base64"
