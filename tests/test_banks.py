import pytest

from sidengine.banks import (
    BasicRomBank,
    CharacterRomBank,
    ColorRAMBank,
    DisconnectedBusBank,
    ExtraSidBank,
    IOBank,
    KernalRomBank,
    Pla,
    RomBank,
    SidBank,
    SystemRAMBank,
)


class FakePla(Pla):
    def __init__(self, last=0):
        self.last = last
        self.port = None

    def set_cpu_port(self, state):
        self.port = state

    def last_read_byte(self):
        return self.last

    def phi2_time(self):
        return 0


class FakeSid:
    def __init__(self):
        self.regs = {}
        self.resets = []

    def reset(self, volume):
        self.resets.append(volume)

    def peek(self, address):
        return self.regs.get(address, 0)

    def poke(self, address, value):
        self.regs[address] = value


def test_color_ram_keeps_low_nibble_and_mirrors():
    bank = ColorRAMBank()
    bank.poke(0xD805, 0xAB)
    assert bank.peek(0xD805) == 0x0B
    assert bank.peek(0xD805 + 0x400) == bank.peek(0xD805)


def test_color_ram_reset_clears():
    bank = ColorRAMBank()
    bank.poke(0xD800, 0x7)
    bank.reset()
    assert all(bank.peek(0xD800 + i) == 0 for i in range(0x400))


def test_disconnected_bus_returns_last_byte_and_ignores_writes():
    pla = FakePla(last=0x5A)
    bank = DisconnectedBusBank(pla)
    bank.poke(0xDE00, 0x11)
    assert bank.peek(0xDE00) == 0x5A
    pla.last = 0x22
    assert bank.peek(0xDF80) == 0x22


def test_system_ram_power_up_pattern():
    bank = SystemRAMBank()
    bank.reset()
    assert [bank.peek(i) for i in range(16)] == [
        0x00, 0x00, 0xFF, 0xFF, 0xFF, 0xFF, 0x00, 0x00,
        0x00, 0x00, 0xFF, 0xFF, 0xFF, 0xFF, 0x00, 0x00,
    ]
    assert [bank.peek(0x4000 + i) for i in range(8)] == [
        0xFF, 0xFF, 0x00, 0x00, 0x00, 0x00, 0xFF, 0xFF,
    ]
    assert bank.peek(0x8002) == bank.peek(0x0002)
    assert bank.peek(0xC000) == bank.peek(0x4000)


def test_system_ram_round_trip():
    bank = SystemRAMBank()
    bank.poke(0x1234, 0x56)
    assert bank.peek(0x1234) == 0x56


def test_io_bank_dispatches_by_page():
    io = IOBank()
    ram = SystemRAMBank()
    color = ColorRAMBank()
    io.set_bank(0x0, ram)
    io.set_bank(0x8, color)
    io.poke(0xD010, 0x99)
    io.poke(0xD810, 0x99)
    assert ram.peek(0xD010) == 0x99
    assert color.peek(0xD810) == 0x09
    assert io.get_bank(0x8) is color


def test_io_bank_unmapped_raises():
    io = IOBank()
    with pytest.raises(LookupError):
        io.peek(0xD400)


def test_sid_bank_forwards_and_resets():
    sid = FakeSid()
    bank = SidBank()
    bank.set_sid(sid)
    bank.poke(0xD418, 0x0F)
    assert bank.peek(0xD418) == 0x0F
    bank.reset()
    assert sid.resets == [0xF]


def test_sid_bank_without_sid_raises():
    bank = SidBank()
    with pytest.raises(LookupError):
        bank.peek(0xD400)


def test_extra_sid_bank_maps_32_byte_slots():
    ram = SystemRAMBank()
    sid = FakeSid()
    bank = ExtraSidBank()
    bank.reset_sid_mapper(ram)
    bank.add_sid(sid, 0xDE20)
    bank.poke(0xDE20, 0x44)
    bank.poke(0xDE3F, 0x45)
    bank.poke(0xDE40, 0x46)
    assert sid.regs == {0xDE20: 0x44, 0xDE3F: 0x45}
    assert ram.peek(0xDE40) == 0x46
    assert bank.peek(0xDE20) == 0x44


def test_extra_sid_bank_reset_resets_all_sids():
    first, second = FakeSid(), FakeSid()
    bank = ExtraSidBank()
    bank.add_sid(first, 0xDE00)
    bank.add_sid(second, 0xDF00)
    bank.reset()
    assert first.resets == [0xF]
    assert second.resets == [0xF]


def test_rom_bank_ignores_writes():
    rom = CharacterRomBank()
    image = bytes(range(256)) * 16
    rom.set(image)
    rom.poke(0xD001, 0x00)
    assert rom.peek(0xD001) == image[1]
    assert rom.peek(0xDFFF) == image[0xFFF]


def test_rom_bank_size_must_be_power_of_two():
    with pytest.raises(ValueError):
        RomBank(0x3000)


def test_rom_bank_short_image_rejected():
    with pytest.raises(ValueError):
        CharacterRomBank().set(bytes(10))


def test_kernal_stub_vectors():
    kernal = KernalRomBank()
    kernal.set(None)
    assert kernal.peek(0xFFFC) == 0x39
    assert kernal.peek(0xFFFD) == 0xEA
    assert kernal.peek(0xFFFE) == 0xA0
    assert kernal.peek(0xEA39) == 0x02


def test_kernal_reset_hook_and_restore():
    kernal = KernalRomBank()
    image = bytearray(0x2000)
    image[0x1FFC] = 0x11
    image[0x1FFD] = 0x22
    kernal.set(bytes(image))
    kernal.install_reset_hook(0xBEEF)
    assert (kernal.peek(0xFFFC), kernal.peek(0xFFFD)) == (0xEF, 0xBE)
    kernal.reset()
    assert (kernal.peek(0xFFFC), kernal.peek(0xFFFD)) == (0x11, 0x22)


def test_basic_trap_and_restore():
    basic = BasicRomBank()
    image = bytes((i * 7) & 0xFF for i in range(0x2000))
    basic.set(image)
    basic.install_trap(0x1234)
    assert basic.peek(0xA7AF) == 0x34
    assert basic.peek(0xA7B0) == 0x12
    basic.reset()
    assert [basic.peek(0xA7AE + i) for i in range(3)] == list(
        image[0x07AE:0x07B1]
    )


def test_basic_subtune_patch_and_restore():
    basic = BasicRomBank()
    image = bytes(0x2000)
    basic.set(image)
    basic.set_subtune(5)
    assert basic.peek(0xBF54) == 5
    assert basic.peek(0xBF53) != 0
    basic.reset()
    assert all(basic.peek(0xBF53 + i) == 0 for i in range(11))