"""
JWT debugger service package for the JWT Toolkit.

- app.main: Application entrypoint that wires routes and lifecycle.
- app.tokens: The token engine (codec, signing, decode/encode, verify,
  claim evaluation). Usable on its own without FastAPI.
- app.inspection: Debugger operations that combine engine calls and read
  the clock.

Design notes:
- Importing this package has no side effects; no clock reads or IO happen
  at import time.
- Secrets and token bodies are never logged.
"""
