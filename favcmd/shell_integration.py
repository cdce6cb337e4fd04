"""
Static text printed by ``fav-cmd setup`` and ``fav-cmd help``.
"""

SETUP_SNIPPET = r"""# fav-cmd shell integration
# Add to ~/.bashrc or ~/.zshrc, then run `fav` to pick a saved command.
# The chosen command is placed on your prompt (zsh) or in your history
# and run (bash).

fav() {
    local cmd
    cmd="$(fav-cmd list)" || return
    [ -n "$cmd" ] || return
    if [ -n "$ZSH_VERSION" ]; then
        print -z -- "$cmd"
    else
        history -s -- "$cmd"
        printf '%s\n' "$cmd"
        eval -- "$cmd"
    fi
}

# Optional: bind Ctrl-G to the picker in zsh
if [ -n "$ZSH_VERSION" ]; then
    _fav_widget() {
        local cmd
        cmd="$(fav-cmd list)"
        [ -n "$cmd" ] && LBUFFER="$cmd"
        zle reset-prompt
    }
    zle -N _fav_widget
    bindkey '^G' _fav_widget
fi
"""


HELP_TEXT = """fav-cmd - save and reuse your favorite command lines

Usage:
  fav-cmd [COMMAND]

Commands:
  list       Pick a saved command with fzf and print it (default)
  add        Save a new command (prompts for name, description, command)
  delete     Pick a saved command with fzf and remove it
  edit       Open the command file in $EDITOR
  setup      Print the shell integration snippet
  examples   Replace the command file with example commands
  config     Show the effective configuration
  help       Show this help

Files:
  Commands: $XDG_CONFIG_HOME/fav-cmd/commands.txt (one name|description|command per line)
  Config:   $XDG_CONFIG_HOME/fav-cmd/config.toml (optional)

Environment:
  XDG_CONFIG_HOME   Config root (default: ~/.config)
  EDITOR, VISUAL    Editor used by `fav-cmd edit`
  FAVCMD_*          Override any config key, e.g. FAVCMD_FZF_HEIGHT=60%
"""
