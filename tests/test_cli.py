"""Tests for the command line interface."""

import pytest

from linkhelper import RoutingError
from linkhelper.cli import Commands
from linkhelper.log import reset_logging


def test_link_with_string_url():
    assert Commands().link("Home", "/") == '<a href="/">Home</a>'


def test_link_with_routing_options():
    html = Commands().link("Post", {"controller": "posts", "action": "show", "id": 3})
    assert html == '<a href="/posts/show/3">Post</a>'


def test_url_full_with_host():
    commands = Commands(host="example.com", protocol="https")
    assert commands.url({"controller": "posts", "only_path": False}) == (
        "https://example.com/posts"
    )


def test_url_full_without_host_fails():
    with pytest.raises(RoutingError):
        Commands().url({"controller": "posts", "only_path": False})


def test_image():
    html = Commands(images_path="/img/").image("logo", "/", {"size": "10x20"})
    assert html == '<a href="/"><img src="/img/logo.png" alt="Logo" width="10" height="20"></a>'


def test_mail():
    assert Commands().mail("a@b.com", "Mail") == '<a href="mailto:a@b.com">Mail</a>'


def test_unless_current():
    commands = Commands(current={"controller": "pages", "action": "home"})
    assert commands.unless_current("Home", {"action": "home"}) == "Home"
    assert commands.unless_current("About", {"action": "about"}) == (
        '<a href="/pages/about">About</a>'
    )


def test_verbose_enables_logging(capsys):
    commands = Commands(verbose=True)
    try:
        commands.url({"controller": "posts"})
        assert "/posts" in capsys.readouterr().err
    finally:
        reset_logging()
