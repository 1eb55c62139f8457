## @package superDFITS
#  FITS header dump and keyword tabulation tools.
#
__version = "1.0.0"
__version__ = __version
__build = "10/19/26"
__build__ = __build
