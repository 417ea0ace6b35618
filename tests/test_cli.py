'''
Command line front-end tests
'''

from pocketcalc.cli import CLI, render
from pocketcalc.controller import Controller

from pytest import raises


def lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_render():
    c = Controller()
    assert render(c).split() == ['0']
    assert len(render(c)) == 2 + 15
    c.apply_operator('*')
    assert render(c).split() == ['\N{MULTIPLICATION SIGN}', '0']
    c.mantissa.set('1.5')
    c.exponent.set('E+020')
    assert render(c).endswith(' 1.5E+020')


def test_expression(capsys):
    CLI().run(args=['-e', '123*45='])
    assert [line.split() for line in lines(capsys)] == [['5535']]


def test_display_after_each_line(capsys):
    CLI().run(args=['-e', '2+3', '*4', '='])
    assert [line.split() for line in lines(capsys)] == [
        ['+', '3'],
        ['\N{MULTIPLICATION SIGN}', '4'],
        ['14'],
    ]


def test_bad_key_keeps_going(capfd):
    CLI().run(args=['-e', '12?3', '+1='])
    captured = capfd.readouterr()
    assert "Couldn't lex ?3" in captured.err
    assert [line.split() for line in captured.out.splitlines()] == [
        ['12'],
        ['13'],
    ]


def test_verbose(capfd):
    CLI().run(args=['-v', '-e', '7'])
    captured = capfd.readouterr()
    assert captured.err.split('\t')[:3] == ['digit', '7', 'entering']


def test_dump(capsys):
    CLI().run(args=['-D', '-e', '1 +'])
    assert lines(capsys) == [
        '[event]\t<repr(key)>\t<argument>',
        "digit\t'1'\t1",
        "operator\t'+'\t+",
    ]


def test_dump_bad_key(capfd):
    with raises(SystemExit) as e:
        CLI().run(args=['-D', '-e', '1?'])
    assert e.value.code == 2
    assert "Couldn't lex ?" in capfd.readouterr().err


def test_raw_grammar(capsys):
    CLI().run(args=['-G', '-e'])
    assert '(?<digit>' in capsys.readouterr().out
