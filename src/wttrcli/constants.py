from typing import Final

from wttrcli import __version__

# Command-line identity
APP_NAME: Final = "Weather"
COMMAND_NAME: Final = "weather"
VERSION: Final = __version__

# Upstream service
DEFAULT_BASE_URL: Final = "https://wttr.in"

# wttr.in returns its JSON (v1) document when asked for format=j1
FORMAT_PARAM: Final = ("format", "j1")

# Seconds before a request to the service is abandoned
DEFAULT_TIMEOUT: Final = 10.0
