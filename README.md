# holytls

Building blocks for a client that presents itself as a particular Chrome
release: version-aware configuration, error and result types, a hand-driven
coroutine task, and a set of small low-level containers (an arena allocator,
fixed, growable and ring byte buffers, fixed-capacity arrays and strings, an
fd table and intrusive linked lists). It also has a micro-benchmark harness
and a command that benchmarks the containers.

## Installation

```
pip install holytls
```

With the test dependencies:

```
pip install "holytls[test]"
```

## Configuration

```python
from holytls.config import ChromeVersion, ClientConfig

config = ClientConfig.chrome131()
assert config.tls.chrome_version is ChromeVersion.CHROME_131
assert config.pool.max_connections_per_host == 6

latest = ClientConfig.chrome_latest()            # Chrome 143
custom = ClientConfig.for_version(ChromeVersion.CHROME_125)
```

`ClientConfig` groups `TlsConfig`, `Http2Config`, `PoolConfig`,
`ThreadConfig` and `DnsConfig`, all dataclasses with Chrome-like defaults.
Runtime counters have their own dataclass, `ClientStats`.

## Errors, results and tasks

```python
from holytls.errors import Error, ErrorCode
from holytls.result import AsyncResult, Result

ok = AsyncResult.success(200)
assert ok.ok() and ok.map(lambda code: code + 1).value() == 201

failed = AsyncResult.failure(Error(ErrorCode.TIMEOUT, "timed out"))
assert failed.has_error() and not failed
failed.unwrap()      # raises UnwrapError("timed out")

assert not Result.failure("bad input")
```

`Task` wraps a coroutine that starts suspended and is advanced by hand:

```python
import types
from holytls.result import Task

@types.coroutine
def wait():
    return (yield)

async def job():
    reply = await wait()
    return reply * 2

task = Task(job())
task.resume()        # runs up to the first suspension
task.send(21)        # 21 becomes the result of the await
assert task.done() and task.result() == 42
```

## Arena, buffers and containers

```python
from holytls.arena import Arena, scratch
from holytls.buffer import ArenaBuf, RingBuf
from holytls.containers import FdTable, FixedArray

arena = Arena(1024)
with arena.temp():
    block = arena.push(100)       # released when the scope ends

with scratch() as tmp:            # one of two per-thread scratch arenas
    tmp.push_zero(32)

buf = ArenaBuf(arena, 16)
buf.append(b"grows as needed")

ring = RingBuf(8)
ring.write(b"hello")
assert ring.read(5) == b"hello"

table = FdTable(1024)
table.set(3, "socket")
assert 3 in table and table.count() == 1
```

`String8` and `String8List` in `holytls.strings` build strings piece by
piece and join them once:

```python
from holytls.strings import String8, String8List

parts = String8List()
parts.push("a")
parts.push(String8("b"))
assert parts.join_sep(", ") == "a, b"
assert String8("hello world").substr(6) == "world"
```

`DoublyLinkedList` and `SinglyLinkedList` in `holytls.linked_list` link
`DLLNode` and `SLLNode` objects (or subclasses of them) without allocating;
a node belongs to at most one list at a time.

## Benchmarks

Run the core benchmark suite with:

```
holytls-bench
```

`--target-ms` sets roughly how long each benchmark runs and
`--calibration-ms` the batch time reached before scaling to it. In your own
code, use `Suite`, `run_benchmark` and `auto_benchmark` from
`holytls.bench`.

## What this package does not do

It makes no network connections. There is no TLS handshake, no HTTP/2
session, no DNS resolver, connection pool or request sending: the
configuration classes only describe such settings, and nothing in the
package acts on them.