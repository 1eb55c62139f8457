#!/usr/bin/python -u
## @package superDFITS
#  fitsort: sorts out FITS keywords from dfits output.
#
#  dfits file1.fits file2.fits | fitsort NAXIS2 NAXIS1
#
#  Values are separated by tabs, records by linefeeds.  fitsort -d does not
#  print the first line (FILE and keyword names).
#
import sys
from superDFITS.dfitsConfig import *
from superDFITS.dfitsErrors import *
from superDFITS.dfitsLog import *
from superDFITS.dfitsRecord import *

def usage(pname, out):
    out.write("\n\nuse : "+pname+" [-d] [-config file.xml] KEY1 KEY2 ... KEYn\n")
    out.write("Input data is received from stdin\n")
    out.write("Dotted keywords A.B.C stand for HIERARCH ESO A B C\n\n")
#end usage

## Parse command line options into a dfitsConfig holding the keyword requests
def parseCmdLine(args):
    if (args.count("-config") != 0):
        j = args.index("-config")
        if (j+1 >= len(args)):
            raise ValueError("-config requires a file name")
        config = dfitsConfig(args[j+1])
        args = args[:j]+args[j+2:]
    else:
        config = dfitsConfig()
    if (len(args) > 0 and args[0] == "-d"):
        config.setOption("print_header", "no")
        args = args[1:]
    for arg in args:
        if (arg == "-v"):
            config.setOption("verbosity", "verbose")
        elif (arg == "-q"):
            config.setOption("verbosity", "silent")
        else:
            config.addKeyword(arg)
    return config
#end parseCmdLine

def main(argv=None, stdin=None, stdout=None, stderr=None):
    if (argv is None):
        argv = sys.argv
    if (stdin is None):
        stdin = sys.stdin
    if (stdout is None):
        stdout = sys.stdout
    pname = argv[0][argv[0].rfind('/')+1:]

    try:
        config = parseCmdLine(argv[1:])
    except (ValueError, dfitsError) as ex:
        dfitsLog(stream=stderr).writeLog(__name__, str(ex), type=dfitsLog.ERROR)
        usage(pname, stdout)
        return 1
    if (len(config.getKeywords()) == 0):
        usage(pname, stdout)
        return 0
    log = config.getLog(stream=stderr)

    table = dfitsTable(config.getKeywords(), log=log)
    table.ingest(stdin)
    log.writeLog(__name__, str(table.getNRecords())+" records found")
    try:
        table.render(stdout, printHeader=config.getBoolOption("print_header"))
    except NoInputRecords as ex:
        log.writeLog(__name__, str(ex), type=dfitsLog.ERROR, printCaller=False)
        return 1
    return 0
#end main

if __name__ == "__main__":
    sys.exit(main())
