#
# Regression Test
#
# We run all the examples in the examples/basics directory and compare
# their output with the recorded output (the .out file next to each
# script).  Note that the test_basic_examples() method will be picked
# up to run by pytest.
#

import glob, os, sys, difflib, subprocess

class bcolors:
    OK = '\033[92m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'

def diff(s1, s2):
    s1=s1.splitlines(1)
    s2=s2.splitlines(1)
    diff=difflib.unified_diff(s1, s2)
    return ''.join(diff)

def test_basic_examples():
    failed = 0
    script_path = os.path.dirname(os.path.realpath(__file__))
    root_path = os.path.realpath(os.path.join(script_path, '..'))
    basics_files = os.path.join(root_path, 'examples', 'basics', '*.py')
    pyfs = sorted(glob.glob(basics_files))
    assert len(pyfs) > 0
    outfs = ['.out'.join(f.rsplit('.py', 1)) for f in pyfs]

    # make the package importable even if it's not installed
    env = dict(os.environ)
    env['PYTHONPATH'] = os.pathsep.join([root_path, env.get('PYTHONPATH', '')])

    for pyf, outf in zip(pyfs, outfs):
        r = subprocess.run([sys.executable, pyf], stdout=subprocess.PIPE,
                           stderr=subprocess.PIPE, universal_newlines=True, env=env)
        assert r.returncode == 0, "ERROR: can't run %s\n%s" % (pyf, r.stderr)
        s1 = r.stdout

        with open(outf, "r") as f:
            s2 = f.read()

        if s1 == s2:
            print(bcolors.OK+"good: "+pyf+bcolors.ENDC)
        else:
            print(bcolors.FAIL+"bad: "+pyf+bcolors.ENDC)
            print(diff(s1,s2))
            failed += 1
    assert failed == 0

if __name__ == '__main__':
    test_basic_examples()
