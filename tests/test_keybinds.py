from hyprnav.core.bind_parser import MoveFocusBind
from hyprnav.core.keybinds import KeybindManager, KeywordCommand, plan_disable, plan_enable


ARROW_UNBINDS = [
    KeywordCommand("unbind", "SUPER, right"),
    KeywordCommand("unbind", "SUPER, left"),
    KeywordCommand("unbind", "SUPER, up"),
    KeywordCommand("unbind", "SUPER, down"),
]

VIM_BINDS = [
    MoveFocusBind("$mainMod", "H", "l"),
    MoveFocusBind("$mainMod", "L", "r"),
]


def _pairs(commands):
    return [(c.keyword, c.value) for c in commands]


def _assert_unbind_precedes_bind(commands):
    for i, cmd in enumerate(commands):
        if cmd.keyword != "bind":
            continue
        combo = ", ".join(cmd.value.split(", ")[:2])
        assert KeywordCommand("unbind", combo) in commands[:i]


class TestPlanEnable:
    def test_rebinds_parsed_keys(self):
        assert plan_enable(VIM_BINDS) == ARROW_UNBINDS + [
            KeywordCommand("unbind", "$mainMod, H"),
            KeywordCommand("bind", "$mainMod, H, exec, hyprnav left"),
            KeywordCommand("unbind", "$mainMod, L"),
            KeywordCommand("bind", "$mainMod, L, exec, hyprnav right"),
        ]

    def test_fallback_to_super_arrows(self):
        assert plan_enable([]) == ARROW_UNBINDS + [
            KeywordCommand("bind", "SUPER, right, exec, hyprnav right"),
            KeywordCommand("bind", "SUPER, left, exec, hyprnav left"),
            KeywordCommand("bind", "SUPER, up, exec, hyprnav up"),
            KeywordCommand("bind", "SUPER, down, exec, hyprnav down"),
        ]

    def test_custom_program(self):
        commands = plan_enable([MoveFocusBind("$mainMod", "K", "u")], program="/opt/bin/hyprnav")
        assert commands[-1] == KeywordCommand("bind", "$mainMod, K, exec, /opt/bin/hyprnav up")

    def test_unbind_precedes_bind(self):
        _assert_unbind_precedes_bind(plan_enable(VIM_BINDS))


class TestPlanDisable:
    def test_restores_parsed_binds_verbatim(self):
        assert plan_disable(VIM_BINDS) == ARROW_UNBINDS + [
            KeywordCommand("unbind", "$mainMod, H"),
            KeywordCommand("bind", "$mainMod, H, movefocus, l"),
            KeywordCommand("unbind", "$mainMod, L"),
            KeywordCommand("bind", "$mainMod, L, movefocus, r"),
        ]

    def test_unbind_precedes_bind(self):
        _assert_unbind_precedes_bind(plan_disable(VIM_BINDS))

    def test_reverts_enable(self):
        enabled = plan_enable(VIM_BINDS)
        disabled = plan_disable(VIM_BINDS)
        for bind in VIM_BINDS:
            assert KeywordCommand("unbind", bind.combo) in enabled
            assert KeywordCommand("unbind", bind.combo) in disabled
        assert not any("exec" in c.value for c in disabled)

    def test_fallback_to_default_movefocus(self):
        assert plan_disable([]) == ARROW_UNBINDS + [
            KeywordCommand("bind", "$mainMod, left, movefocus, l"),
            KeywordCommand("bind", "$mainMod, right, movefocus, r"),
            KeywordCommand("bind", "$mainMod, up, movefocus, u"),
            KeywordCommand("bind", "$mainMod, down, movefocus, d"),
        ]


class TestKeybindManager:
    def test_enable_from_config(self, hyprctl, hyprland_conf, capsys):
        manager = KeybindManager(hyprctl, hyprland_conf)

        count = manager.enable()

        assert count == 4 + 8
        assert hyprctl.keywords[4:6] == [
            ("unbind", "$mainMod, H"),
            ("bind", "$mainMod, H, exec, hyprnav left"),
        ]
        assert hyprctl.keywords[-1] == ("bind", "$mainMod, J, exec, hyprnav down")
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Applying hyprnav directional bindings...",
            f"hyprnav bindings applied using keys from {hyprland_conf}.",
        ]

    def test_enable_without_config(self, hyprctl, tmp_path, capsys):
        manager = KeybindManager(hyprctl, tmp_path / "missing.conf")

        manager.enable()

        assert hyprctl.keywords == _pairs(plan_enable([]))
        out = capsys.readouterr().out.splitlines()
        assert out[-1] == (
            "No original movefocus bindings found. "
            "Applied default SUPER+arrow hyprnav bindings."
        )

    def test_disable_from_config(self, hyprctl, hyprland_conf, capsys):
        manager = KeybindManager(hyprctl, hyprland_conf)

        count = manager.disable()

        assert count == 4 + 8
        assert hyprctl.keywords[4:] == [
            ("unbind", "$mainMod, H"),
            ("bind", "$mainMod, H, movefocus, l"),
            ("unbind", "$mainMod, L"),
            ("bind", "$mainMod, L, movefocus, r"),
            ("unbind", "$mainMod, K"),
            ("bind", "$mainMod, K, movefocus, u"),
            ("unbind", "$mainMod, J"),
            ("bind", "$mainMod, J, movefocus, d"),
        ]
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Restoring original Hyprland focus bindings...",
            f"Bindings restored from {hyprland_conf}.",
            "Bindings restored.",
        ]

    def test_disable_without_config(self, hyprctl, tmp_path, capsys):
        manager = KeybindManager(hyprctl, tmp_path / "missing.conf")

        manager.disable()

        assert hyprctl.keywords == _pairs(plan_disable([]))
        out = capsys.readouterr().out.splitlines()
        assert out[1:] == [
            "No original movefocus bindings found. Applied default movefocus bindings.",
            "Bindings restored.",
        ]

    def test_custom_program(self, hyprctl, hyprland_conf, capsys):
        KeybindManager(hyprctl, hyprland_conf, program="hyprnav-dev").enable()
        assert ("bind", "$mainMod, L, exec, hyprnav-dev right") in hyprctl.keywords
