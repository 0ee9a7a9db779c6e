"""Constants used throughout devspace."""


# Project layout
SPACE_NAME = ".devspace"
CONFIG_FILE_NAMES = ("config", "config.toml")

# In-container layout
WORKSPACE = "/workspace"
DOTFILES_DIR_NAME = "dotfiles"
DOTFILE_SCRIPTS = ("bootstrap",)
DOTFILE_GLOB = ".[a-zA-Z0-9]*"

# Configuration keys
IMAGE_KEY = "image"
DOCKERFILE_KEY = "dockerfile"
POST_CREATE_COMMAND_KEY = "postCreateCommand"
SHELL_KEY = "shell"
DOTFILES_KEY = "dotfiles"
USER_KEY = "user"
ROOT_PATTERN_KEY = "rootPattern"

DEFAULT_SHELL = "/bin/zsh"

# Name fingerprint prefixes
IMAGE_HASH_PREFIX = "image"
CONTAINER_HASH_PREFIX = "container"

# Environment exported into every container
ENV_DEVSPACE = "DEVSPACE"
ENV_SHARE = "DEVSPACE_SHARE"
ENV_DOTFILES = "DEVSPACE_DOTFILES"

# Container runtime
KEEP_ALIVE_COMMAND = ["/bin/sleep", "infinity"]
DOCKER_EXECUTABLE = "docker"
RUNNING_STATE = "running"

# Timeout values (seconds)
DEFAULT_STOP_TIMEOUT = 10
SHELL_STOP_TIMEOUT = 2

STOP_PROMPT = "Do you want to stop the container? [y/N]: "
