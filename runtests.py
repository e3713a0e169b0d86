# -*- coding: utf-8 -*-
"""Run all tests for `algos`.

Each test module provides a `runtests()` function that runs its tests with
plain `assert`. The test modules are also collectable by `pytest`.
"""

import os
import re
import sys
import traceback
from importlib import import_module

def listtestmodules(path):
    testfiles = listtestfiles(path)
    testmodules = [modname(path, fn) for fn in testfiles]
    return list(sorted(testmodules))

def listtestfiles(path, prefix="test_", suffix=".py"):
    return [fn for fn in os.listdir(path) if fn.startswith(prefix) and fn.endswith(suffix)]

def modname(path, filename):  # some/dir/mod.py --> some.dir.mod
    modpath = re.sub(re.escape(os.path.sep), r".", path)
    themod = re.sub(r"\.py$", r"", filename)
    return ".".join([modpath, themod])

def main():
    failed = []
    for m in listtestmodules(os.path.join("algos", "test")):
        print(f"{m}: ", end="", flush=True)
        # Protect the rest of the run against ImportError and failures in one module.
        try:
            mod = import_module(m)
            mod.runtests()
        except Exception:
            traceback.print_exc()
            failed.append(m)
    if failed:
        print(f"FAILED: {', '.join(failed)}")
    return not failed

if __name__ == '__main__':
    if not main():
        sys.exit(1)  # pragma: no cover, this only runs when the tests fail.
