import logging

# The hidden logger records session internals (tallies, overflow, verdicts)
# without ever reaching the player's console. Nothing is written to disk
# unless a log file is requested explicitly.

def setup_hidden_logger(name="detective_quest", log_file=None):
    """
    Sets up a logger that never propagates to the root logger.

    With ``log_file`` the records go to that file; otherwise they are
    discarded through a NullHandler.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)

    # Check if handler already exists to avoid duplicate logs
    if not logger.handlers:
        if log_file:
            handler = logging.FileHandler(log_file)
            formatter = logging.Formatter('%(asctime)s - %(name)s - %(message)s')
            handler.setFormatter(formatter)
        else:
            handler = logging.NullHandler()

        logger.addHandler(handler)

        # Prevent propagation to the root logger to avoid printing to stdout
        logger.propagate = False

    return logger

# Singleton-like access
hidden_logger = setup_hidden_logger()
