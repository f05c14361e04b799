"""File names and defaults shared across ocenv modules."""

ENV_ROOT_DIRNAME = "ocenv"
CONFIG_FILENAME = ".ocenv.yaml"

BIN_DIRNAME = "bin"
KUBECONFIG_FILENAME = "kubeconfig.json"
OCM_CONFIG_FILENAME = "ocm.json"
KILLPIDS_FILENAME = ".killpids"

DIR_MODE = 0o700
BIN_MODE = 0o744

# Seconds between login-maintenance runs in the ocb loop.
LOGIN_REFRESH_INTERVAL = 30
# Seconds ocb waits for the backplane tunnel before logging in.
TUNNEL_STARTUP_DELAY = 5
