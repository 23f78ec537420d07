# phaseswarm/__main__.py
from phaseswarm.cli import main

raise SystemExit(main())
