# deepclone

`deepclone` makes deep copies of object graphs. Containers are rebuilt
element by element. Shared references and reference cycles are kept as
they are in the copy. Types can supply their own copy logic.

## Installation

```
pip install deepclone
```

## Usage

```python
from deepclone.copier import deep_copy, deep_copy_skip_unsupported, must_copy

data = {"key": [1, 2, 3], "nested": {"flag": True}}
clone = deep_copy(data)
assert clone == data
assert clone["key"] is not data["key"]
```

### Cycles and shared references

When one object is reached by more than one path, it is copied once. Every
path in the copy then leads to that single copy. A self-referencing
structure gives a copy that references itself in the same way.

### Unsupported values

Some values cannot be copied, such as callables or open channels of
communication. For these, `deep_copy` raises `UnsupportedTypeError`. `None`
is always copied as `None`.

`deep_copy_skip_unsupported` does not raise. It puts `None` in the copy
wherever an unsupported value was found, and copies everything else.

`must_copy` behaves like `deep_copy`. It is a short form for when a failure
should simply propagate.

### Custom copy logic

A class that derives from `Copier` and defines `copy()` is in charge of its
own copying. `deep_copy` calls that method and returns what it gives back.
Any exception the method raises reaches the caller unchanged.

```python
from deepclone.copier import Copier, deep_copy

class Counter(Copier):
    def __init__(self, value):
        self.value = value

    def copy(self):
        return Counter(self.value)

assert deep_copy(Counter(3)).value == 3
```

## Running the tests

```
pip install -e ".[test]"
pytest
```