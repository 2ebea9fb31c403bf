import sys

from selfie_relay.api.cli import main

sys.exit(main())
