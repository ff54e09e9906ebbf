# mysh

Building blocks of a tcsh-like Unix shell. The package parses command lines into operator trees. It keeps an environment and an alias table and expands `$VARIABLE` references and glob patterns. It also locates programs on `PATH`, tracks background jobs and reads and writes a command history. Built-in commands such as `cd`, `setenv`, `alias`, `foreach`, `repeat`, `which`, `where`, `jobs`, `fg` and `bg` come with it too.

## Installation

```
pip install .
```

## Modules

- `mysh.strutils`: `split_words` splits text on separators and keeps double-quoted parts whole. `split_command_line` does the same for both kinds of quote. `compare_nocase` and `compare_nocase_prefix` compare strings while ignoring ASCII case.
- `mysh.tree`: `fill_tree(commands)` parses a command into a tree of `Node` objects. It splits from right to left on the operators `>`, `>>`, `<`, `<<`, `|`, `2>` and `(`.
- `mysh.environment`: `Environment` is an ordered list of `NAME=value` entries with `get`, `set`, `unset`, `in`, `lines` and `copy`. `validate_name` raises `InvalidVariableName` for names that are not allowed.
- `mysh.inhibitors`: `strip_inhibitors` removes quote characters from a word. It raises `UnmatchedQuoteError` when a quote is left open.
- `mysh.aliases`: `AliasTable` defines, removes, lists and expands aliases. `is_quoted` tells whether a string is enclosed in matching quotes.
- `mysh.expansion`: `expand_dollar` replaces a `$` reference with its value from an `Environment`, or raises `UndefinedVariable`. `expand_globs` replaces pattern arguments with the sorted matching paths, or raises `NoMatch`.
- `mysh.lookup`: `resolve`, `search_path`, `find_all` and `path_directories` locate the program a command names. `check_executable` and `has_valid_header` check that it can run. Failures raise `CommandError`.
- `mysh.jobs`: `JobTable` records background `Job`s, collects finished ones with `update`, and moves jobs to the foreground or background. The module also has `is_background` and `trim_background`.
- `mysh.history`: `History` loads and saves a history file, by default `~/.bash_history`. It searches entries by prefix and formats ranges as `(id) text`.
- `mysh.builtins`: the built-in commands as functions of a shell object and an argument list. `lookup_builtin(name)` finds one by name, ignoring case.

## Examples

```python
from mysh.aliases import AliasTable
from mysh.environment import Environment
from mysh.expansion import expand_dollar
from mysh.inhibitors import strip_inhibitors
from mysh.strutils import split_words
from mysh.tree import fill_tree

env = Environment({"HOME": "/home/user"})
env.set("EDITOR", "vi")
env.get("EDITOR")                      # 'vi'
expand_dollar(env, "echo $HOME")       # 'echo /home/user'

aliases = AliasTable()
aliases.define("ll", ["ls", "-l"])
aliases.expand("ll /tmp")              # 'ls -l /tmp'

strip_inhibitors("'a b'")              # 'a b'
split_words("a:b::c", ":")             # ['a', 'b', 'c']

tree = fill_tree("ls | wc")
tree.item, tree.left.item, tree.right.item   # ('|', 'ls ', 'wc')
```

The built-in commands need a shell object. It must have `env` (an `Environment`), `aliases` (an `AliasTable`), `jobs` (a `JobTable`) and `input` (a text stream). It must also have a `run(line)` method that executes a full command line and returns its status. `foreach` and `repeat` call that method.

## What the package does not do

The package has no `mysh` command and no interactive loop. Nothing in it runs a parsed tree. It does not start programs, connect pipes or apply redirections. Your `run` method has to provide all of that. There is also no line editor: no prompt header, no arrow-key history browsing and no Tab completion. Lines starting with `#` get no special handling.

## Development

```
pip install .[test]
pytest
```