"""Default configuration values and starter .fizzrail.toml template."""

DEFAULT_TOML = """\
# FizzRail Configuration
version = "1.0"

[game]
start = 1
count = 100

[rules]
# use = ["FIZZ", "BUZZ", "BANG", "THE_ANSWER"]   # order is priority; ids ignore case; empty = extended game
# disable = ["BANG"]
# guard = true            # library hook: wrap rules so exceptions become a terminal "Error: ..." line.
#                         # Built-in and YAML rules never raise, so CLI output is unchanged.

[engine]
strategy = "fold"         # fold | pipeline

[output]
format = "plain"          # plain | table | json
show_summary = true
"""
