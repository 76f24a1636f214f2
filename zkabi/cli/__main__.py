from zkabi.cli import dispatch

dispatch()
