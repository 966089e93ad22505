"""Allow running the trainer with ``python -m ielts_trainer``."""

import sys

from ielts_trainer.cli.main import main

sys.exit(main())
