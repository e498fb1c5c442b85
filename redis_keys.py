DEFAULT_PREFIX = "io"

ROOM_CHANNEL = "{prefix}:{room}" # room pub/sub channel
ROOM_CLIENTS_KEY = "{prefix}:{room}:clients" # set of client ids, written by the gateway

# **Example keys for prefix `io` and room `lobby`**
# - `io:lobby` = channel receiving `["event", data]` frames
# - `io:lobby:clients` = set of connected client ids (read only here)
