import sys
from sniffgo_notes.cli import main

sys.exit(main())
