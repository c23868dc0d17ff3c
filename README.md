# safecat

`safecat` reads standard input and writes it into a directory with the
maildir algorithm. The data is first written to a uniquely named file in a
temporary directory, synced to disk, and then hard-linked into the
destination directory. The temporary file is removed afterwards. A file
therefore appears in the destination either whole or not at all.

It can deliver into a maildir (`tmp/` and `new/`) from a shell script. It can
also spool data safely into any directory that another process watches.

## Installation

```
pip install .
```

## Usage

```
safecat <tempdir> <destdir>
```

For example, to deliver a message into a maildir:

```
safecat ~/Maildir/tmp ~/Maildir/new < message.txt
```

On success the name of the new file is printed on standard output and the
exit status is 0.

File names have the form `SECONDS.MMICROSECONDSPPID.HOSTNAME`, for example
`1700000010.M123456P4242.mailhost`. `SECONDS` is a TAI-style count that runs
10 seconds ahead of Unix time; `MICROSECONDS` is always six digits.

## Behaviour

- Both directories must exist, must be directories, and must have the owner
  write bit set in their mode. If not, the command exits with status 111.
- If the chosen temporary name already exists, a new name is tried every
  2 seconds. After 5 attempts the command gives up.
- The temporary file is created exclusively with mode `0644`.
- On platforms with `SIGALRM`, and when run from the main thread, writing and
  linking are limited to 24 hours. When that time runs out, the temporary
  file is removed and the command fails with "Timer has expired; giving up".
- Any failure after the temporary file was created removes it again.
- Errors are reported on standard error. A wrong number of arguments prints
  `safecat: usage: safecat <tempdir> <destdir>` and exits with status 100;
  all other failures print `safecat: fatal: ...`, followed where relevant by
  a short description of the system error, and exit with status 111.

## From Python

```python
import sys
from safecat.cli import deliver

name = deliver("spool/tmp", "spool/new", sys.stdin.buffer)
```

`deliver(tempdir, destdir, source, sleep=time.sleep)` returns the name of the
delivered file. `source` may be a binary file object or a file descriptor;
`sleep` is called between naming attempts. On failure it raises
`safecat.errors.FatalError`, whose `message`, `exit_code` and `errno_value`
attributes describe the failure and whose `render()` method returns the line
the command prints.

Other pieces can be used on their own:

- `safecat.naming.unique_name(now=None, pid=None, hostname=None)` builds a
  file name; `now` is nanoseconds since the Unix epoch.
- `safecat.naming.get_hostname()` returns the local host name.
- `safecat.dirs.check_directory(path)` checks a directory as described above
  and returns its `os.stat_result`.
- `safecat.copying.copy_stream(source, fd)` copies a stream into a descriptor
  and returns the number of bytes copied.
- `safecat.errors.error_str(code)` returns a short description of an errno
  value, or `"unknown error"`.

## What it does not do

`safecat` does not create the temporary or destination directories, nor a
maildir's `cur/` directory; they must already exist.