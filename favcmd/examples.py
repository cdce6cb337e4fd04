"""Example commands written by ``fav-cmd examples``."""
from favcmd.models import Command


EXAMPLE_COMMANDS = [
    Command("git-status", "Show working tree status", "git status"),
    Command("git-log-graph", "Compact commit graph of all branches", "git log --oneline --graph --decorate --all"),
    Command("git-undo-commit", "Undo last commit, keep changes staged", "git reset --soft HEAD~1"),
    Command("git-branches-recent", "Branches sorted by last commit", "git branch --sort=-committerdate"),
    Command("disk-usage", "Largest entries in the current directory", "du -sh * | sort -rh | head -20"),
    Command("find-large-files", "Files over 100MB below the current directory", "find . -type f -size +100M"),
    Command("ports-listening", "Processes listening on TCP ports", "lsof -iTCP -sTCP:LISTEN -n -P"),
    Command("docker-ps", "Running containers with status", "docker ps --format 'table {{.Names}}\\t{{.Status}}\\t{{.Ports}}'"),
    Command("docker-prune", "Remove unused images, containers and networks", "docker system prune -f"),
    Command("http-server", "Serve the current directory on port 8000", "python3 -m http.server 8000"),
    Command("my-ip", "Public IP address", "curl -s https://ifconfig.me"),
    Command("weather", "Weather forecast in the terminal", "curl -s wttr.in"),
    Command("tar-extract", "Extract a .tar.gz archive", "tar -xzvf archive.tar.gz"),
    Command("grep-todo", "TODO and FIXME notes in the source tree", "grep -rn 'TODO\\|FIXME' ."),
]


def example_commands():
    """Return a fresh copy of the example records."""
    return list(EXAMPLE_COMMANDS)
