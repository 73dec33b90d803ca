# sidengine

Building blocks of a Commodore 64 SID music player engine, in pure Python
with no third-party dependencies.

## What is inside

- `sidengine.events` – `EventScheduler`, a two-phase (PHI1/PHI2) scheduler
  running on a double-rate internal clock, with the abstract `Event`, the
  function-calling `EventCallback` and the `EventPhase` enumeration.
- `sidengine.env` – `C64Env`, the abstract environment through which chips
  raise IRQ/NMI/reset and set the BA and light pen lines.
- `sidengine.banks` – memory and I/O banks: `SystemRAMBank` (64K with the
  power-up pattern), `ColorRAMBank`, `IOBank`, `SidBank`, `ExtraSidBank`,
  `DisconnectedBusBank`, the ROM banks `KernalRomBank`, `BasicRomBank` and
  `CharacterRomBank`, and the abstract `Bank` and `Pla` interfaces.
- `sidengine.zeroram` – `ZeroRAMBank`, the zero page with the CPU data port
  at `$00`/`$01`, including the fall-off of unused port bits (`DataBit`).
- `sidengine.romcheck` – `KernalCheck`, `BasicCheck` and `ChargenCheck`
  identify known ROM images by MD5; unknown images give `"Unknown Rom"`.
- `sidengine.external_filter` – `ExternalFilter`, the fixed-point low-pass
  and DC-blocking output stage.
- `sidengine.config` – `SidConfig` settings with the `Playback`, `SidModel`,
  `CiaModel` and `C64Model` enumerations.
- `sidengine.tuneinfo` – `SidTuneInfo`, a container for tune metadata, with
  the `Clock`, `Model`, `Compatibility` and `Speed` enumerations.
- `sidengine.tunetools` – path helpers: `file_name_without_path`,
  `slashed_file_name_without_path`, `file_ext_of_path`.
- `sidengine.textutils` – case-insensitive comparison, trimming,
  tokenising, Latin-1/UTF-8 folding and `load_file`.
- `sidengine.endian` – splitting and joining 16-bit words.

## Installing

```
pip install .
```

## Example

```python
from sidengine.events import EventCallback, EventPhase, EventScheduler
from sidengine.banks import SystemRAMBank
from sidengine.romcheck import KernalCheck

scheduler = EventScheduler()
fired = []
tick = EventCallback("tick", lambda: fired.append(scheduler.get_time(EventPhase.PHI2)))
scheduler.schedule(tick, 3, EventPhase.PHI2)
scheduler.clock()
print(fired)                       # [3]

ram = SystemRAMBank()
ram.reset()
print(hex(ram.peek(0x0002)))       # 0xff, from the power-up pattern

print(KernalCheck(bytes(0x2000)).info())   # Unknown Rom
```

## What the package does not do

- It does not read tune files: there is no PSID/RSID, `.P00` or `.prg`
  parser, and nothing fills a `SidTuneInfo` from a file.
- It does not emulate the CPU, the SID, the CIAs or the VIC-II, and produces
  no audio; the banks expect SID and PLA objects to be supplied by the caller.
- It has no command-line program.

## Running the tests

```
pip install .[test]
pytest
```