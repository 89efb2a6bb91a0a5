import logging
import signal
import sys

from chef_vibes import create_app

logger = logging.getLogger(__name__)


def _exit_on_sigterm(signum, frame):
    # SystemExit runs the atexit hooks, which close the MongoDB client
    sys.exit(0)


app = create_app()

if __name__ == '__main__':
    signal.signal(signal.SIGTERM, _exit_on_sigterm)
    port = app.config['PORT']
    logger.info(f"The port is running on : {port}")
    app.run(port=port)
