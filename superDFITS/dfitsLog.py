## @package superDFITS
#  Documentation for dfitsLog.
#
from datetime import *
import os, sys

## Log for the dfits and fitsort programs.
#  Writes to the error stream unless a log file is given.
class dfitsLog:
    INFO = 0
    WARNING = 1
    ERROR = 2
    #Verbosity flags
    BRIEF = 0
    NORMAL = 1
    VERBOSE = 2
    SILENT = -1
    _name = "dfitsLog"
    _filename = None
    _stream = None
    _verbosity = BRIEF
    _date = None
    _dashes = "\t"+"-"*60+"\n"
    _error = "ERROR: "
    _warning = "Warning: "

    ## The constructor.
    def __init__(self, filename=None, stream=None, verbosity=BRIEF, header=False):
        self._date = datetime.now()
        self._verbosity = verbosity
        self._filename = filename
        if (filename is None):
            if (stream is None):
                stream = sys.stderr
            self._stream = stream
        else:
            logdir = os.path.dirname(filename)
            if (logdir != '' and not os.access(logdir, os.F_OK)):
                os.makedirs(logdir)
        if (header and verbosity >= self.NORMAL):
            self.write("superDFITS Log\n")
            self.write("\trun at "+self._date.strftime("%Y-%m-%d.%H:%M:%S")+"\n")
            self.write("\tin directory "+os.getcwd()+"\n")
            self.write(self._dashes)
    #end __init__

    def getVerbosity(self):
        return self._verbosity
    #end getVerbosity

    def setVerbosity(self, verbosity):
        self._verbosity = verbosity
    #end setVerbosity

    ## Append text to the log file or stream
    def write(self, text):
        if (self._filename is not None):
            f = open(self._filename, 'a')
            f.write(text)
            f.close()
        else:
            self._stream.write(text)
            self._stream.flush()
    #end write

    def writeLog(self, name, message, type=INFO, tabLevel=0, printCaller=True, verbosity=None, callerLevel=1):
        if (verbosity is None):
            if (type == self.WARNING or type == self.ERROR):
                verbosity = self.BRIEF
            else:
                verbosity = self.NORMAL
        if (verbosity > self._verbosity):
            #This message is below the set verbosity level.  Do nothing.
            return
        s = ""
        if (tabLevel > 0):
            s += "\t"*tabLevel
        if (printCaller):
            s += name+"::"+sys._getframe(callerLevel).f_code.co_name+"> "
        if (type == self.ERROR):
            s += self._error
        elif (type == self.WARNING):
            s += self._warning
        self.write(s+message+"\n")
    #end writeLog
