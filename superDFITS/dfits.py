#!/usr/bin/python -u
## @package superDFITS
#  dfits: FITS header display.
#
#  dfits [-x xtnum] <list of FITS files>
#  dfits [-x xtnum] -
#
import sys
from superDFITS.dfitsCard import *
from superDFITS.dfitsConfig import *
from superDFITS.dfitsErrors import *
from superDFITS.dfitsLog import *

def usage(pname, out):
    out.write(
"\n\n"
"usage: "+pname+" [-x xtnum] [-config file.xml] [-v|-q] <list of FITS files>\n"
"usage: "+pname+" [-x xtnum] [-config file.xml] [-v|-q] -\n"
"\n"
"The former version expects file names.\n"
"The latter expects data coming in from stdin.\n"
"\n"
"-x xtnum specifies the extension header to print\n"
"-x 0     specifies main header + all extensions\n"
"\n\n")
#end usage

## Parse command line options into a dfitsConfig.  Returns (config, filter, filenames)
def parseCmdLine(args):
    filter = False
    config = None
    #config file first so that command line options override it
    if (args.count("-config") != 0):
        j = args.index("-config")
        if (j+1 >= len(args)):
            raise ValueError("-config requires a file name")
        config = dfitsConfig(args[j+1])
        args = args[:j]+args[j+2:]
    else:
        config = dfitsConfig()
    files = []
    j = 0
    while (j < len(args)):
        if (args[j] == "-x"):
            if (j+1 >= len(args)):
                raise ValueError("-x requires an extension number")
            config.setOption("xtnum", args[j+1])
            j += 2
            continue
        elif (args[j] == "-v"):
            config.setOption("verbosity", "verbose")
        elif (args[j] == "-q"):
            config.setOption("verbosity", "silent")
        elif (args[j] == "-"):
            filter = True
        else:
            files.append(args[j])
        j += 1
    return (config, filter, files)
#end parseCmdLine

## Dump the requested header (main or extension) from a filename.  Returns number of errors.
def dumpFile(name, out, xtnum, log):
    try:
        f = open(name, 'rb')
    except OSError as ex:
        log.writeLog(__name__, str(FileOpenError(name)), type=dfitsLog.ERROR)
        return 1
    try:
        reader = dumpFits(f, out, xtnum=xtnum, name=name, log=log)
        log.writeLog(__name__, name+": "+str(reader.getNCards())+" cards read, "+str(reader.getExtension())+" extensions seen")
    except dfitsError as ex:
        log.writeLog(__name__, name+": "+str(ex), type=dfitsLog.ERROR)
        return 1
    finally:
        f.close()
    return 0
#end dumpFile

## Dump the requested header from a stream (filter mode).  Returns number of errors.
def dumpStream(stream, out, xtnum, log):
    try:
        dumpFits(stream, out, xtnum=xtnum, log=log)
    except dfitsError as ex:
        log.writeLog(__name__, str(ex), type=dfitsLog.ERROR)
        return 1
    return 0
#end dumpStream

def main(argv=None, stdin=None, stdout=None, stderr=None):
    if (argv is None):
        argv = sys.argv
    if (stdin is None):
        stdin = sys.stdin.buffer
    if (stdout is None):
        stdout = sys.stdout
    pname = argv[0][argv[0].rfind('/')+1:]

    #No arguments prints out a usage message
    if (len(argv) < 2 or argv[1] == '-h' or argv[1] == '-help'):
        usage(pname, stdout)
        return 1

    try:
        (config, filter, files) = parseCmdLine(argv[1:])
        xtnum = config.getIntOption("xtnum")
    except (ValueError, dfitsError) as ex:
        dfitsLog(stream=stderr).writeLog(__name__, str(ex), type=dfitsLog.ERROR)
        usage(pname, stdout)
        return 1
    log = config.getLog(stream=stderr)
    if (log.getVerbosity() >= dfitsLog.VERBOSE):
        config.printOptions(stderr if stderr is not None else sys.stderr)

    #Filter mode: process data received from stdin
    if (filter):
        return dumpStream(stdin, stdout, xtnum, log)

    #Normal mode: loop on all file names given on command-line
    err = 0
    for name in files:
        err += dumpFile(name, stdout, xtnum, log)
    #Returns number of errors during process
    return err
#end main

if __name__ == "__main__":
    sys.exit(main())
