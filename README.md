# spkg

`spkg` is a command-line package manager. It keeps local SQLite copies of the package databases of the repositories you configure. It lists the packages in those databases and shows their details and specfiles. It can also download source packages.

## Installation

```
pip install .
```

This installs the `spkg` command.

## Configuration

`spkg` reads `config.yml` from its system configuration directory. The file sets the interface language and the repositories to use:

```yaml
language: en_US
main_url: https://repo.example.com
build_directory: /tmp/spkg-build
old_repo: {}
repositories:
  main:
    url: https://repo.example.com/main
    arch: [x86_64, aarch64]
  extra:
    url: https://repo.example.com/extra
    arch: all
```

`arch` takes a single architecture or a list of architectures. `spkg` stops with an error message when the file is missing or does not have this shape.

There are two sets of paths. The environment variable `SPKG_DEVELOPMENT_MODE` chooses between them:

- **Installed system** (the default): configuration is read from `/etc/spkg/`, language files from `/etc/spkg/lang/`, and data is kept in `/var/lib/spkg/`. Repository databases are kept in `/var/lib/spkg/mirrors/`.
- **Development mode** (`SPKG_DEVELOPMENT_MODE` set to any value other than `0`, `false` or `no`): the same layout is used under `./data/etc/spkg/` and `./data/var/lib/spkg/`.

Language strings are YAML files named after the language, for example `lang/en_US.yml`. A file holds a mapping of keys to strings. It may also hold that mapping under a top-level key named after the language. A key with no string is shown as the key itself. `en_US` is used to report an unreadable configuration.

## Usage

```
spkg sync                      # download the package database of every configured repository
spkg list                      # list the packages in the synced databases
spkg list --installed          # list the packages recorded in the world database
spkg list --arch aarch64       # list only the packages for one architecture
spkg info <package>            # show what the database knows about a package
spkg spec <package>            # fetch the package's specfile and show it
spkg download <package>...     # download the source package into the current directory
spkg install-src <package>...  # check that each package has a source package
spkg install <package>...      # same as install-src
```

Options:

- `-a`, `--arch ARCH`: choose packages built for `ARCH`. Without this option, `spkg` chooses packages for `all` or for the host architecture.
- `--installed`: with `list`, read the installed packages from `world.db` in the data directory.
- `-s`, `--sandbox`: accepted, but it has no effect.

`spkg sync` first deletes database files in the mirrors directory that no configured repository uses. It then downloads `<url>/packages.<arch>.db` for each repository and architecture and saves it as `<repo>.<arch>.db`. If every download fails, `spkg` exits with status 1. If only some fail, it prints a warning.

Run `spkg` with no arguments, or with a command it does not know, to print the help text. `info` and `spec` need a package name.

## What spkg does not do

- `install` and `install-src` do not build or install anything. They only check that each package's specfile offers a source package. If one does not, they stop with an error.
- The parser accepts `install-bin` (also `binstall`), `plugin` and `dummy`. These commands are not supported: `spkg` reports this and exits with status 2. Binary packages cannot be installed, and plugins cannot be listed or run.
- Nothing in `spkg` creates or updates the world database. `list --installed` needs a `world.db` that already exists.

## Library use

The modules in the package can also be used from Python:

```python
from spkg.metadata import Metadata
from spkg.paths import format_size
from spkg.specfile import Specfile

Metadata.parse("s1:b0")   # Metadata(srcpkg=True, binpkg=False)
format_size(2048)         # "2.0 kB"

spec = Specfile.from_yaml("""
package: {name: hello, version: "1.0", description: greeting, author: someone}
binpkg:
  x86_64: {url: https://repo.example.com/main/hello.tar}
""")
spec.binpkg_url("x86_64")  # "https://repo.example.com/main/hello.tar"
```

Other modules:

- `spkg.config`: `Config` and `RepositoryInfo`.
- `spkg.package`: `PackageList`, `BasePackageList` and `get_package`.
- `spkg.spinners`: `Spinner` and `SimpleSpinner`, the terminal spinners. The named animations are in `spkg.spinner_frames`.