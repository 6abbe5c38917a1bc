# barstatus

barstatus builds one status line from a list of small components (date
and time, battery, CPU and memory usage, disk space, network traffic,
volume and more) and refreshes it once per interval. By default it sets
the line as the name of the X root window, which bars such as dwm's
display. With `-s` it writes the line to standard output instead, for
bars that read lines from a pipe.

## Installation

```
pip install .
```

Setting the root window name runs the `xsetroot` program, so that must
be installed and `DISPLAY` must be set unless you use `-s` or `-1`.

## Usage

```
barstatus [-v] [-s] [-1]
```

- `-v` prints `barstatus-1.0` to standard error and exits with status 1.
- `-s` writes the status line to standard output on every update.
- `-1` writes the status line once to standard output and exits.

Switches may be combined (`-s1`), and `--` ends them. Any other argument
prints the usage line and exits with status 1.

`SIGINT` and `SIGTERM` stop the loop; when the root window was used, its
name is then cleared. `SIGUSR1` cuts the current pause short so the line
is refreshed at once.

## Configuration

The configuration is read from the TOML file named by `BARSTATUS_CONFIG`,
or else from `$XDG_CONFIG_HOME/barstatus/config.toml` (by default
`~/.config/barstatus/config.toml`). Without a file, the line shows the
date and time as `%F %T`, refreshed every second.

```toml
interval = 1000        # milliseconds between updates
unknown_str = "n/a"    # shown when a component has no value
maxlen = 2048          # the line is cut to fit in maxlen - 1 characters

[[args]]
function = "cpu_perc"
fmt = "cpu %s%% "

[[args]]
function = "ram_perc"
fmt = "| ram %s%% "

[[args]]
function = "netspeed_rx"
fmt = "| down %sB/s "
argument = "eth0"

[[args]]
function = "datetime"
fmt = "| %s"
argument = "%F %T"
```

Each `[[args]]` entry names a component in `function`, passes it
`argument` (if any), and puts its value into `fmt` with Python's `%`
operator (`fmt` defaults to `%s`). Unknown keys, unknown component
names and values of the wrong type are errors; the program then prints
`config '<path>': <reason>` and exits with status 1. `netspeed_rx` and
`netspeed_tx` are given the configured interval automatically.

## Components

A component takes one string argument (ignored by those that need none)
and returns its value as a string, or `None` when the value cannot be
read; a warning goes to standard error and `unknown_str` is shown.

| Module              | Components |
|---------------------|------------|
| `barstatus.battery` | `battery_perc`, `battery_state`, `battery_remaining` (argument: battery name, e.g. `BAT0`) |
| `barstatus.cpu`     | `cpu_freq`, `cpu_perc` |
| `barstatus.disk`    | `disk_free`, `disk_perc`, `disk_total`, `disk_used` (argument: mount point) |
| `barstatus.files`   | `cat` (first line of a file), `num_files` (entries in a directory), `run_command` (first line of a shell command's output) |
| `barstatus.memory`  | `ram_free`, `ram_perc`, `ram_total`, `ram_used`, `swap_free`, `swap_perc`, `swap_total`, `swap_used` |
| `barstatus.network` | `ipv4`, `ipv6`, `netspeed_rx`, `netspeed_tx`, `wifi_perc`, `wifi_essid` (argument: interface) |
| `barstatus.system`  | `datetime` (argument: strftime format), `hostname`, `kernel_release`, `load_avg`, `uptime`, `gid`, `uid`, `username`, `entropy`, `temp` (argument: millidegree sensor file) |
| `barstatus.volume`  | `vol_perc` (argument: OSS mixer device, e.g. `/dev/mixer`) |

`cpu_perc`, `netspeed_rx` and `netspeed_tx` compare against the previous
reading, so they have no value on their first update. `battery_state`
gives `+` charging, `-` discharging, `o` full or not charging, `?`
otherwise; `battery_remaining` gives `Xh Ym` while discharging and an
empty string otherwise.

Sizes are printed with `barstatus.util.fmt_human`: one decimal place and
an SI prefix (`k`, `M`, `G`, ...) for base 1000, or a binary prefix
(`Ki`, `Mi`, `Gi`, ...) for base 1024.

## Using the pieces from Python

```python
from barstatus.config import Arg, component
from barstatus.status import render_status

args = [
    Arg(component("datetime"), "%s", "%F %T"),
    Arg(component("ram_perc"), " | ram %s%%", None),
]
print(render_status(args, "n/a", 2048))
```

`barstatus.config.load_config(path)` returns a `Config` read from a TOML
file, and `barstatus.status.run(config, options, out)` runs the update
loop, handing each line to `out`.

## What it does not do

The readings come from Linux interfaces (`/proc`, `/sys`, the OSS mixer
and wireless ioctls); other systems are not supported.

There are no keyboard indicator or keyboard layout components, since
reading them needs a connection to the X server. `barstatus.keyboard`
only offers the text handling for them: `format_indicators(fmt,
led_mask)` renders caps and num lock state from an LED mask you supply,
and `get_layout(symbols, group)` picks a layout name out of an XKB
symbols string.