import io
import numpy as np
import pytest
from fitsHelpers import *
from superDFITS import dfits, fitsort

fits = pytest.importorskip("astropy.io.fits")

@pytest.fixture
def twoFiles(tmp_path):
    file1 = tmp_path/"file1.fits"
    file2 = tmp_path/"file2.fits"
    fits.PrimaryHDU(np.zeros((200, 100), dtype=np.int16)).writeto(str(file1))
    fits.PrimaryHDU(np.zeros(20, dtype=np.int16)).writeto(str(file2))
    return (str(file1), str(file2))

@pytest.fixture
def mefFile(tmp_path):
    name = str(tmp_path/"mef.fits")
    hdus = [fits.PrimaryHDU()]
    for j in range(1, 4):
        hdus.append(fits.ImageHDU(np.zeros(10*j, dtype=np.float32), name="SCI"+str(j)))
    fits.HDUList(hdus).writeto(name)
    return name

def runDfits(args, stdin=None):
    out = io.StringIO()
    err = io.StringIO()
    status = dfits.main(["dfits"]+args, stdin=stdin, stdout=out, stderr=err)
    return (status, out.getvalue(), err.getvalue())

def runFitsort(args, transcript):
    out = io.StringIO()
    err = io.StringIO()
    status = fitsort.main(["fitsort"]+args, stdin=io.StringIO(transcript), stdout=out, stderr=err)
    return (status, out.getvalue(), err.getvalue())

def test_dfits_then_fitsort(twoFiles):
    (status, transcript, err) = runDfits(list(twoFiles))
    assert status == 0
    assert err == ""
    assert transcript.startswith("====> file "+twoFiles[0]+" (main) <====\n")
    (status, table, err) = runFitsort(["NAXIS2", "NAXIS1"], transcript)
    assert status == 0
    rows = [[field.strip() for field in row.split('\t')] for row in table.split('\n')[:-1]]
    assert rows[0] == ["FILE", "NAXIS2", "NAXIS1", ""]
    assert rows[1] == [twoFiles[0], "200", "100", ""]
    assert rows[2] == [twoFiles[1], "", "20", ""]
    #every row has the same layout
    lengths = [len(row) for row in table.split('\n')[:-1]]
    assert lengths[0] == lengths[1] == lengths[2]

def test_fitsort_without_header_line(twoFiles):
    (status, transcript, err) = runDfits(list(twoFiles))
    (status, table, err) = runFitsort(["-d", "naxis1"], transcript)
    assert status == 0
    assert table.split('\n')[0].startswith(twoFiles[0])

def test_dfits_all_extensions(mefFile):
    (status, out, err) = runDfits(["-x", "0", mefFile])
    assert status == 0
    lines = out.split('\n')
    markers = [line for line in lines if line.startswith("====>")]
    assert markers == ["====> file "+mefFile+" (main) <====", "====> xtension 1", "====> xtension 2", "====> xtension 3"]
    (status, table, err) = runFitsort(["-d", "EXTNAME", "NAXIS1"], out)
    rows = [[field.strip() for field in row.split('\t')] for row in table.split('\n')[:-1]]
    assert [row[1] for row in rows] == ["", "SCI1", "SCI2", "SCI3"]
    assert [row[2] for row in rows] == ["", "10", "20", "30"]

def test_dfits_one_extension(mefFile):
    (status, out, err) = runDfits(["-x", "2", mefFile])
    assert status == 0
    assert "====> xtension 2" in out
    assert "SCI2" in out
    assert "SCI1" not in out
    assert "SCI3" not in out

def test_dfits_missing_extension(twoFiles):
    (status, out, err) = runDfits(["-x", "2", twoFiles[0]])
    assert status == 0
    assert "====> xtension" not in out
    assert out.rstrip('\n').endswith("END")

def test_dfits_counts_errors(tmp_path, twoFiles):
    bad = tmp_path/"bad.fits"
    bad.write_bytes(card("NOTFITS = 1").encode('ascii'))
    missing = str(tmp_path/"missing.fits")
    (status, out, err) = runDfits([missing, str(bad), twoFiles[0]])
    assert status == 2
    assert "cannot open file ["+missing+"]" in err
    assert "not a FITS file" in err
    assert "====> file "+twoFiles[0]+" (main) <====" in out

def test_dfits_filter_mode():
    (status, out, err) = runDfits(["-"], stdin=fitsStream(next=1))
    assert status == 0
    assert out.startswith("SIMPLE  =")
    assert "====>" not in out
    (status, table, err) = runFitsort(["BITPIX", "NAXIS"], out)
    assert status == 0
    assert table.split('\n')[1] == "    \t8     \t0    \t"

def test_dfits_filter_mode_read_error():
    (status, out, err) = runDfits(["-"], stdin=io.BytesIO(b"SIMPLE  = T"))
    assert status == 1
    assert "error reading input" in err

def test_dfits_usage():
    (status, out, err) = runDfits([])
    assert status == 1
    assert "usage: dfits [-x xtnum]" in out

def test_dfits_bad_xtnum(twoFiles):
    (status, out, err) = runDfits(["-x", "two", twoFiles[0]])
    assert status == 1
    assert "xtnum" in err

def test_fitsort_usage():
    (status, out, err) = runFitsort([], "")
    assert status == 0
    assert "use : fitsort [-d]" in out

def test_fitsort_no_records():
    (status, out, err) = runFitsort(["NAXIS1"], "NAXIS1  =  100\n")
    assert status == 1
    assert out == ""
    assert "no input data corresponding to dfits output" in err

def test_bad_file_does_not_hide_next_file(tmp_path, twoFiles):
    bad = tmp_path/"bad.fits"
    bad.write_bytes(card("NOTFITS = 1").encode('ascii'))
    (status, transcript, err) = runDfits([str(bad), twoFiles[0]])
    assert status == 1
    assert "====> file "+str(bad) not in transcript
    (status, table, err) = runFitsort(["NAXIS1"], transcript)
    assert status == 0
    rows = [[field.strip() for field in row.split('\t')] for row in table.split('\n')[:-1]]
    assert rows[1:] == [[twoFiles[0], "100", ""]]

def test_dfits_x_without_number(twoFiles):
    (status, out, err) = runDfits([twoFiles[0], "-x"])
    assert status == 1
    assert "-x requires an extension number" in err
    assert "cannot open file" not in err
    assert "usage: dfits" in out

def test_fitsort_missing_config(tmp_path):
    missing = str(tmp_path/"none.xml")
    (status, out, err) = runFitsort(["-config", missing, "NAXIS1"], "")
    assert status == 1
    assert "cannot open file ["+missing+"]" in err
    assert "use : fitsort" in out

def test_fitsort_config_without_name():
    (status, out, err) = runFitsort(["NAXIS1", "-config"], "")
    assert status == 1
    assert "-config requires a file name" in err

def test_malformed_config(tmp_path):
    name = tmp_path/"broken.xml"
    name.write_text("<fitsort><option name='xtnum' value='0'></fitsort>")
    (status, out, err) = runFitsort(["-config", str(name), "NAXIS1"], "")
    assert status == 1
    assert "malformed config file" in err
    (status, out, err) = runDfits(["-config", str(name), "-"], stdin=fitsStream())
    assert status == 1
    assert "malformed config file" in err
