import io
import os
import shlex
import tempfile
import unittest
from unittest.mock import patch, MagicMock

from ppld.driver.config import build_configuration
from ppld.driver.options import LinkOptions
from ppld.driver.plan import ObjectFile
from ppld.engine import GnuLinkEngine, EngineError


def make_config(**kwargs):
    options = LinkOptions([ObjectFile(1, 'a.o')], **kwargs)
    return build_configuration(options, 'out')


def touch(*parts):
    filename = os.path.join(*parts)
    with open(filename, 'w'):
        pass
    return filename


class GnuLinkEngineTestCase(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.dir = self.tmp.name
        self.libdir = os.path.join(self.dir, 'lib')
        os.mkdir(self.libdir)

    def make_engine(self, **kwargs):
        engine = GnuLinkEngine(**kwargs)
        engine.configure(make_config(search_dirs=[self.libdir]))
        engine.set_output(os.path.join(self.dir, 'out'))
        return engine

    def test_add_object(self):
        engine = self.make_engine()
        filename = touch(self.dir, 'a.o')
        engine.add_object(filename)
        self.assertEqual([filename], engine.inputs)

    def test_missing_object(self):
        engine = self.make_engine()
        with self.assertRaises(EngineError):
            engine.add_object(os.path.join(self.dir, 'missing.o'))

    def test_directory_as_object(self):
        engine = self.make_engine()
        with self.assertRaises(EngineError):
            engine.add_object(self.libdir)

    def test_output_directory_missing(self):
        engine = GnuLinkEngine()
        engine.configure(make_config())
        with self.assertRaises(EngineError):
            engine.set_output(os.path.join(self.dir, 'nope', 'out'))

    def test_namespec_prefers_shared(self):
        touch(self.libdir, 'libfoo.a')
        shared = touch(self.libdir, 'libfoo.so')
        engine = self.make_engine()
        engine.add_namespec('foo')
        self.assertEqual([shared], engine.inputs)

    def test_namespec_static(self):
        static = touch(self.libdir, 'libfoo.a')
        touch(self.libdir, 'libfoo.so')
        engine = self.make_engine(static=True)
        engine.add_namespec('foo')
        self.assertEqual([static], engine.inputs)

    def test_namespec_verbatim(self):
        filename = touch(self.libdir, 'crt.o')
        engine = self.make_engine()
        engine.add_namespec(':crt.o')
        self.assertEqual([filename], engine.inputs)

    def test_namespec_missing(self):
        engine = self.make_engine()
        with self.assertRaises(EngineError) as cm:
            engine.add_namespec('doesnotexist_ppld')
        self.assertIn('libdoesnotexist_ppld.a', cm.exception.msg)

    def test_sysroot_search_dirs(self):
        """ Test that system and = prefixed dirs are placed in the sysroot """
        engine = GnuLinkEngine()
        engine.configure(
            make_config(sysroot='/sr', search_dirs=['=/opt', '/a']))
        self.assertEqual(
            ['/sr/opt', '/a', '/sr/lib', '/sr/usr/lib'], engine.search_dirs())

    def test_sysroot_user_system_dir(self):
        """ Test that a user given /lib is not placed in the sysroot """
        engine = GnuLinkEngine()
        engine.configure(make_config(sysroot='/sr', search_dirs=['/lib']))
        self.assertEqual(
            ['/lib', '/sr/lib', '/sr/usr/lib'], engine.search_dirs())

    def test_search_dirs_without_sysroot(self):
        engine = GnuLinkEngine()
        engine.configure(make_config(search_dirs=['=/opt']))
        self.assertEqual(['/opt', '/lib', '/usr/lib'], engine.search_dirs())

    def test_shared_command(self):
        engine = GnuLinkEngine()
        engine.configure(make_config(
            shared=True, soname='libx.so.1', wraps=['malloc'],
            dynamic_linker='/lib/ld.so', sysroot='/sr'))
        engine.set_output(os.path.join(self.dir, 'libx.so'))
        command = engine.command()
        self.assertEqual('ld', command[0])
        self.assertIn('--sysroot=/sr', command)
        self.assertIn('-shared', command)
        self.assertIn('-Bsymbolic', command)
        self.assertIn('--wrap=malloc', command)
        index = command.index('-soname')
        self.assertEqual('libx.so.1', command[index + 1])
        index = command.index('--dynamic-linker')
        self.assertEqual('/lib/ld.so', command[index + 1])
        self.assertEqual(
            ['-o', os.path.join(self.dir, 'libx.so')], command[-2:])

    def test_executable_command(self):
        engine = self.make_engine()
        command = engine.command()
        self.assertNotIn('-shared', command)
        self.assertNotIn('-Bsymbolic', command)

    def test_dry_run(self):
        """ Test that dry run prints the inputs in order """
        obj = touch(self.dir, 'a.o')
        lib = touch(self.libdir, 'libm.a')
        f = io.StringIO()
        engine = self.make_engine(dry_run=True, stdout=f)
        engine.add_object(obj)
        engine.add_namespec('m')
        engine.link()
        line = f.getvalue()
        self.assertLess(line.index(obj), line.index(lib))

    def test_dry_run_quotes_paths(self):
        directory = os.path.join(self.dir, 'my dir')
        os.mkdir(directory)
        obj = touch(directory, 'a.o')
        f = io.StringIO()
        engine = GnuLinkEngine(dry_run=True, stdout=f)
        engine.configure(make_config())
        engine.set_output(os.path.join(directory, 'out'))
        engine.add_object(obj)
        engine.link()
        self.assertEqual(
            ['ld', '-L/lib', '-L/usr/lib', obj, '-o',
             os.path.join(directory, 'out')],
            shlex.split(f.getvalue()))

    def test_link_failure(self):
        engine = self.make_engine()
        result = MagicMock(returncode=1, stdout='', stderr='undefined foo\n')
        with patch('ppld.engine.gnu.subprocess.run', return_value=result):
            with self.assertRaises(EngineError) as cm:
                engine.link()
        self.assertEqual('undefined foo', cm.exception.msg)

    def test_link_success(self):
        engine = self.make_engine(ld_path='my-ld')
        result = MagicMock(returncode=0, stdout='', stderr='')
        with patch('ppld.engine.gnu.subprocess.run',
                   return_value=result) as run:
            engine.link()
        self.assertEqual('my-ld', run.call_args[0][0][0])

    def test_missing_linker(self):
        engine = self.make_engine(
            ld_path=os.path.join(self.dir, 'no-such-ld'))
        with self.assertRaises(EngineError):
            engine.link()

    def test_link_unconfigured(self):
        with self.assertRaises(EngineError):
            GnuLinkEngine().link()


if __name__ == '__main__':
    unittest.main()
