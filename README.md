# sigtalk

sigtalk sends a text message from one process to another. It uses only two
signals, `SIGUSR1` and `SIGUSR2`. Each byte of the message goes out as eight
signals, most significant bit first. `SIGUSR1` carries a 1 bit and `SIGUSR2`
a 0 bit. The server acknowledges every bit with `SIGUSR1` before the client
sends the next one. A zero byte ends the message. When the server receives
it, the server writes a newline and answers with `SIGUSR2`. The client then
prints `200`.

Text is sent as UTF-8. The server writes each received byte to standard
output as it arrives.

## Requirements

- The client runs on any POSIX system.
- The server waits for signals with `signal.sigwaitinfo`, so it needs a
  platform that provides it, such as Linux.

## Installation

```
pip install .
```

## Usage

Start the server. It prints its process id and then waits for messages:

```
$ sigtalk-server
PID: 12345
```

From another terminal, send a message to that process id:

```
$ sigtalk-client 12345 "Hello, world"
200
```

The server writes `Hello, world` and then a newline.

The client takes exactly two arguments: the server's PID and the message.
It prints a usage line to standard error and exits with status 1 in these
cases:

- it gets any other number of arguments;
- the PID is not an integer;
- the PID is not positive.

If a signal cannot be sent or a handler cannot be installed, either program
prints `Signal failed: ...` to standard error and exits with status 1. The
server runs until it is interrupted, and it exits with status 130 on Ctrl-C.

## Library use

- `sigtalk.bits`
  - `encode_byte(byte)` returns the eight bits of a byte.
  - `encode_message(message)` yields the bits of a message and its
    terminating zero byte. It rejects messages that contain a NUL byte.
  - `ByteDecoder` rebuilds bytes from bits. Its `feed(bit)` returns a byte
    once the eighth bit arrives. Its `reset()` drops a partial byte, and its
    `pending` count tells how many bits are held.
- `sigtalk.signals`
  - `install_handler(signo, handler)` installs a handler.
  - `send_signal(pid, signo)` sends a signal to a process.
  - `bit_to_signal(bit)` and `signal_to_bit(signo)` map between bits and
    signals.
  - Failures to install a handler or send a signal are raised as
    `SignalError`, a subclass of `OSError`.
- `sigtalk.server.Server(out=None, notify=None)`
  - `handle(signo, pid)` processes one signal.
  - `serve_forever()` waits for signals and handles them.
  - `out` is a binary stream and defaults to standard output.
  - `notify(pid, signo)` sends the replies and defaults to `send_signal`.
- `sigtalk.client.Client(server_pid, poll_interval=42e-6)`
  - `send_byte(byte)` sends one byte.
  - `send(message)` sends a whole message. It returns whether the server
    confirmed the end of the message.
  - The acknowledgement handlers must be installed in the sending process.
    The `sigtalk-client` command installs them itself.
- `sigtalk.printf`
  - `render(fmt, *args)` and `printf(fmt, *args, file=None)` form a small
    formatter for `%s %c %d %i %u %x %X %p %%`.
  - Integers are treated as 32-bit C values.

## Limitations

- The server keeps one decoding state for all senders. Two clients that
  send at the same time will interleave their bits and garble both
  messages.
- There is no timeout. A client whose server never answers waits forever.

## Running the tests

```
pip install ".[test]"
pytest
```