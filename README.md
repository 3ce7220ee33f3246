# gosec

Building blocks of a security checker for Go source code, as a Python
library: the CWE catalogue the rules refer to, the JSON configuration,
issues with their scores and code snippets, reports, import and call
tracking, Go literal decoding, package discovery, and the bookkeeping of
findings, `#nosec` annotations and build errors during a scan.

## Modules

| Module                  | Contents                                                                  |
|-------------------------|---------------------------------------------------------------------------|
| `gosec.cwe`             | `Weakness`, `get()` and the CWE version constants and URIs                |
| `gosec.config`          | `Config`, `GlobalOption`, `ConfigError`                                   |
| `gosec.errors`          | `Error` and `sort_errors()`                                               |
| `gosec.vflag`           | `ValidatedFlag`, a string value that refuses anything containing `-`      |
| `gosec.issue`           | `Score`, `MetaData`, `Issue`, `ReportInfo`, `new_issue()`, `code_snippet()`, `get_cwe_by_rule()` |
| `gosec.call_list`       | `CallList` and `strip_vendor()`                                           |
| `gosec.import_tracker`  | `ImportTracker`: plain, aliased and initialisation-only imports           |
| `gosec.helpers`         | `get_int/get_float/get_char/get_string`, GOPATH helpers, `package_paths()`, `excluded_dirs_regexp()`, `root_path()` |
| `gosec.analyzer`        | `Analyzer`, `Metrics`, `PackageError`, `is_generated_file()`              |
| `gosec.cli`             | Issue sorting and filtering, score parsing, option handling               |

## Examples

Look up a weakness:

```python
from gosec import cwe

weakness = cwe.get("798")
weakness.sprint_id()   # 'CWE-798'
weakness.sprint_url()  # 'https://cwe.mitre.org/data/definitions/798.html'
weakness.to_json()     # {'id': '798', 'url': '...798.html'}
```

Load a configuration and query a global option. Values in the `global`
section are turned into strings; `true` and `enabled` count as enabled.
Missing sections or options raise `ConfigError`.

```python
import io
from gosec.config import Config, GlobalOption

config = Config()
config.read_from(io.StringIO('{"global": {"nosec": true}}'))
config.get_global(GlobalOption.NOSEC)         # 'true'
config.is_global_enabled(GlobalOption.NOSEC)  # True
config.section("global")                      # {'nosec': 'true'}

out = io.BytesIO()
config.write_to(out)                          # compact JSON, keys sorted
```

Track calls and imports of interest:

```python
from gosec.call_list import CallList
from gosec.import_tracker import ImportTracker

calls = CallList()
calls.add_all("crypto/md5", "New", "Sum")
calls.add("bytes.Buffer", "WriteString")
calls.contains("crypto/md5", "New")                     # True
calls.contains_pointer("*bytes.Buffer", "WriteString")  # True

tracker = ImportTracker()
tracker.track_file(['"fmt"', '"crypto/md5"'])
tracker.track_import('"crypto/md5"', "hash")
tracker.imported_name("crypto/md5")  # 'hash'
tracker.import_path("hash")          # 'crypto/md5'
```

Decode Go literals:

```python
from gosec.helpers import get_int, get_string

get_int("0x1F")             # 31
get_string('"a\\tb"')       # 'a\tb'
```

Find the packages below a directory, leaving out vendored code:

```python
from gosec.helpers import excluded_dirs_regexp, package_paths

excludes = excluded_dirs_regexp(["vendor", ".git"])
packages = package_paths("./project/...", excludes)
```

Record what a scan finds:

```python
from gosec.analyzer import Analyzer, PackageError
from gosec.issue import Score, new_issue

analyzer = Analyzer()
analyzer.parse_errors([PackageError("main.go:4:5", "expected declaration")])

rules, ignore_all = analyzer.ignored_rules(["// #nosec G301 G401"])
# rules == ['G301', 'G401'], ignore_all is False

issue = new_issue("main.go", 10, 10, 3, "G401", "Use of weak cryptographic primitive",
                  Score.MEDIUM, Score.HIGH)
analyzer.record_issue(issue, ignored="G401" in rules)
analyzer.record_file(42)
analyzer.finish()
issues, metrics, errors = analyzer.report()
```

Order and filter findings the way a report shows them:

```python
from gosec.cli import convert_to_score, filter_issues, sort_issues

sort_issues(issues)
kept, counted = filter_issues(
    issues,
    convert_to_score("medium"),
    convert_to_score("low"),
    False,
)
```

## Suppressing findings

`Analyzer.ignored_rules()` looks through the comment texts attached to a
node for the `#nosec` tag, or for the alternative tag set through the
`GlobalOption.NOSEC_ALTERNATIVE` option. A tag naming no rule ignores
everything; a tag naming rule IDs, as in `#nosec G401 G301`, ignores only
those. When the `nosec` global option is enabled the tags are not honoured.
With `show-ignored` enabled, ignored issues are kept and marked `nosec`
instead of being dropped.

## What this package does not do

It does not parse or type-check Go source, and it contains no security
rules; the caller walks the code, decides what is an issue and hands the
results to `Analyzer`. There is no command-line program and no report
writer for JSON, YAML, SARIF or other output formats: `gosec.cli` offers
only the pieces such a program would use.

## Running the tests

Install the `test` extra and run pytest from the project directory.