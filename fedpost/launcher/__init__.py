"""
Launcher subsystem for fedpost.

Modules:
  controller.py — arrow-key menu loop, selection state, dispatch.
  executor.py   — action runner: confirm, run one script, report exit code.
  keys.py       — escape-sequence key decoder and cbreak terminal source.
  entries.py    — MenuEntry and the fixed provisioning menu.
"""
