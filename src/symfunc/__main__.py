from __future__ import annotations

from symfunc.demo import main

main()
