import logging


def get_logger(name):
    # Keep everything under the monkeylex namespace so the CLI can turn
    # debug output on with a single logger
    if not (name == 'monkeylex' or name.startswith('monkeylex.')):
        name = f'monkeylex.{name}'
    return logging.getLogger(name)
