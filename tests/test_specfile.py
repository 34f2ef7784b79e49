import threading
from http.server import BaseHTTPRequestHandler, HTTPServer

import pytest

from spkg.specfile import (
    Specfile,
    SpecfileBinPkgArch,
    SpecfilePackage,
    SpecfileSrcPkg,
    fetch_specfile,
)

SAMPLE = """\
package:
  name: vim
  version: 9.10
  description: Text editor
  author: Example Maintainer
srcpkg:
  compose: https://repo.example.com/vim/compose.yml
binpkg:
  x86_64:
    url: https://repo.example.com/vim/vim-x86_64.tar
"""


def test_parse_package():
    spec = Specfile.from_yaml(SAMPLE)
    assert spec.package == SpecfilePackage(
        name="vim", version="9.10", description="Text editor", author="Example Maintainer"
    )
    assert spec.srcpkg == SpecfileSrcPkg(compose="https://repo.example.com/vim/compose.yml")


def test_binpkg_entries():
    spec = Specfile.from_yaml(SAMPLE)
    assert spec.binpkg.x86_64 == SpecfileBinPkgArch(url="https://repo.example.com/vim/vim-x86_64.tar")
    assert spec.binpkg.aarch64 is None


@pytest.mark.parametrize(
    ("arch", "available"),
    [("x86_64", True), ("aarch64", False), ("riscv64", False)],
)
def test_binpkg_available(arch, available):
    assert Specfile.from_yaml(SAMPLE).binpkg_available(arch) is available


def test_binpkg_url():
    spec = Specfile.from_yaml(SAMPLE)
    assert spec.binpkg_url("x86_64") == "https://repo.example.com/vim/vim-x86_64.tar"
    assert spec.binpkg_url("aarch64") is None


def test_optional_sections_missing():
    text = "package:\n  name: a\n  version: '1'\n  description: d\n  author: x\n"
    spec = Specfile.from_yaml(text)
    assert spec.srcpkg is None
    assert spec.binpkg is None
    assert spec.binpkg_available("x86_64") is False


def test_null_sections_are_none():
    text = SAMPLE.split("srcpkg:")[0] + "srcpkg: ~\nbinpkg: null\n"
    spec = Specfile.from_yaml(text)
    assert spec.srcpkg is None
    assert spec.binpkg is None


def test_missing_package_raises():
    with pytest.raises(ValueError):
        Specfile.from_yaml("srcpkg:\n  compose: x\n")


def test_missing_field_raises():
    with pytest.raises(ValueError):
        Specfile.from_yaml(SAMPLE.replace("  author: Example Maintainer\n", ""))


def test_invalid_yaml_raises():
    with pytest.raises(ValueError):
        Specfile.from_yaml("package: [broken\n")


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path == "/vim.yml":
            body = SAMPLE.encode("utf-8")
            self.send_response(200)
        else:
            body = b""
            self.send_response(404)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def server():
    httpd = HTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{httpd.server_address[1]}"
    httpd.shutdown()
    httpd.server_close()


def test_fetch_specfile(server):
    assert fetch_specfile(f"{server}/vim.yml") == Specfile.from_yaml(SAMPLE)


def test_fetch_specfile_not_found(server):
    with pytest.raises(ConnectionError, match="Err not reachable"):
        fetch_specfile(f"{server}/missing.yml")