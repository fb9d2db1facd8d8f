#!/usr/bin/env python3

import os
import logging

from .bot import main


def run():
    logging.basicConfig(level=logging.INFO)
    main(os.environ['DB'])


if __name__ == '__main__':
    run()
