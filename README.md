# e2ekit

Building blocks for end-to-end test suites. It has no dependencies outside
the standard library.

- `e2ekit.flags` parses a suite's command-line options into an `EnvFlags`
  value.
- `e2ekit.envconf` holds an environment's settings in a `Config` object.
- `e2ekit.features` declares features out of setup, assessment and teardown
  steps with `FeatureBuilder`, and builds table-driven assessments with
  `Table`.
- `e2ekit.types` defines the shared `Level` enum and the `Feature` and
  `Step` protocols.

## Installation

```
pip install e2ekit
```

## Command-line flags

`flags.parse_args(args)` returns a frozen `EnvFlags` dataclass. The function
`flags.parse()` does the same for `sys.argv[1:]`.

| Option | `EnvFlags` field | Kind |
| --- | --- | --- |
| `--feature` | `feature` | string |
| `--assess` | `assessment` | string |
| `--labels` | `labels` | `key=value` list |
| `--kubeconfig` | `kubeconfig` | string |
| `--namespace` | `namespace` | string |
| `--skip-labels` | `skip_labels` | `key=value` list |
| `--skip-features` | `skip_features` | string |
| `--skip-assessment` | `skip_assessment` | string |
| `--parallel` | `parallel` | boolean |
| `--dry-run` | `dry_run` | boolean |
| `--fail-fast` | `fail_fast` | boolean |
| `--disable-graceful-teardown` | `disable_graceful_teardown` | boolean |

Options are written with one dash or two. A value follows either as the next
argument or after `=`. A boolean option given alone is true. It also accepts
`=true`, `=false`, `=1`, `=0` and similar values.

Parsing stops at the first argument that is not an option, or after `--`.

Label lists are comma separated (`"k0=v0, k1=v1"`). Each key and value is
stripped of surrounding spaces and collected into a `LabelsMap`, which is a
`dict` subclass.

These cases raise `flags.FlagsError`, a subclass of `ValueError`:

- an unknown option;
- a missing value;
- a malformed label;
- `--fail-fast` together with `--parallel`.

```python
from e2ekit import flags

env = flags.parse_args(["-assess", "volume test", "--labels", "k0=v0, k1=v1", "-parallel"])
env.assessment   # "volume test"
env.labels       # {"k0": "v0", "k1": "v1"}
env.parallel     # True
```

## Configuration

`envconf.Config` is a dataclass. Its `with_*` methods update it in place and
return it, so calls can be chained. The regex setters compile their argument
with `re.compile`.

```python
from e2ekit import envconf

cfg = envconf.new_from_flags(["--namespace", "demo", "--labels", "env=dev"])
cfg.with_feature_regex("network.*").with_fail_fast()

cfg = envconf.new_with_kubeconfig("/tmp/kubeconfig")
cfg.with_random_namespace()      # namespace becomes a random "testns-..." name

name = envconf.random_name("testns-", 16)
```

`new_from_flags()` with no argument parses the process's own arguments.

`random_name(prefix, n)` returns a name of exactly `n` characters. It starts
with the prefix and a dash, followed by random hex digits. An `n` of 0 means
32, and a prefix already `n` characters or longer is returned unchanged.

## Defining features

```python
from e2ekit import features
from e2ekit.types import Level

def check_pods(ctx, t, cfg):
    return ctx

feature = (
    features.new("pod list")
    .with_label("type", "api")
    .setup(lambda ctx, t, cfg: ctx)          # step named "pod list-setup"
    .assess("pods exist", check_pods)
    .teardown(lambda ctx, t, cfg: ctx)       # step named "pod list-teardown"
    .feature()
)

assessments = features.get_steps_by_level(feature.steps, Level.ASSESS)
matching = features.filter_steps_by_name(feature.steps, r"pods")
```

Steps are kept in the order they were added. `with_setup` and `with_teardown`
add steps under a name you choose. `with_step` adds a step at any `Level`.

Table-driven assessments:

```python
table = features.Table([
    features.TableEntry("first", check_pods),
    features.TableEntry("", check_pods),   # named "Assessment-1"
    features.TableEntry("skipped"),        # no assessment: left out
])
feature = table.build("table feature").feature()
```

## What it does not do

The package describes features and configuration. It does not run them.

- It has no test environment or runner that executes steps.
- It has no Kubernetes client. `Config.client` simply holds whatever object
  you give it.
- It does not create or manage clusters or namespaces.

## Running the tests

```
pip install -e ".[test]"
pytest
```