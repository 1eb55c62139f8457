## @package superDFITS
#  Error kinds raised by the card reader and the record aggregator.
#

## Base class for all superDFITS errors
class dfitsError(Exception):
    _name = "dfitsError"
    _message = "error"

    def __init__(self, message=None, filename=None):
        if (message is None):
            message = self._message
        self.filename = filename
        Exception.__init__(self, message)
    #end __init__
#end dfitsError

## First card missing or not starting with the magic prefix
class NotFitsFormat(dfitsError):
    _name = "NotFitsFormat"
    _message = "not a FITS file"

## Stream ended in the middle of a card or before the main header END
class ReadError(dfitsError):
    _name = "ReadError"
    _message = "error reading input"

## Aggregator received no records
class NoInputRecords(dfitsError):
    _name = "NoInputRecords"
    _message = "*** error: no input data corresponding to dfits output"

## Named input could not be opened
class FileOpenError(dfitsError):
    _name = "FileOpenError"

    def __init__(self, filename, message=None):
        if (message is None):
            message = "cannot open file ["+str(filename)+"]"
        dfitsError.__init__(self, message, filename=filename)
    #end __init__
