import logging
import sys

from porterstem.scripts.stem_words import main

logging.basicConfig(format='%(asctime)s - %(module)s - %(levelname)s - %(message)s', level=logging.INFO)
sys.exit(main())
