# --- Settings ---
HOST = "0.0.0.0"
PORT = 9000

# Request log sink name
LOGGER_NAME = "webserver"

# --- Controller defaults ---
ACCESS_SYSTEM_URL = f"http://127.0.0.1:{PORT}"
ACCESS_SYSTEM_URLPREFIX = "/"
ACCESS_SYSTEM_TIMEOUT = 3.0
