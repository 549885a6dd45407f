import sys


class Logger(object):
    """ Writes everything sent to stdout to a log file as well """

    def __init__(self, filename: str, mode: str = "a"):
        self.terminal = sys.stdout
        self.log = open(filename, mode)

    def write(self, message):
        self.terminal.write(message)
        self.log.write(message)
        self.log.flush()

    def flush(self):
        self.terminal.flush()

    def close(self):
        self.log.close()
