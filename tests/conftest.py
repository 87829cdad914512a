"""Shared pytest fixtures and configuration for pytest."""

import logging

import pytest

from protoutline.cli.bootstrap import LOGGER_NAME
from protoutline.display.console import set_console

# Line numbers matter: tests assert 1-indexed lines of this text.
PROTO3_TEXT = """\
syntax = "proto3";

package foo.bar;

import "google/protobuf/descriptor.proto";

service FooService {
  rpc DoBar(Foo) returns (Bar);
  rpc DoBaz(Foo) returns (Baz) {
    option deprecated = true;
  };
}

option java_package = "com.example.foo";
option (custom) = { name: "x;y" };

// Foo has no fields.
message Foo {}

message Bar {
  int32 i32 = 1;
}

message Baz {
  // Comments and discarded statements between members.
  reserved 2, 15, 9 to 11;
  reserved "foo", "bar";
  option deprecated = true;

  /* Nested declarations */
  enum NestedEnum {
    NULL = 0;
    ONE = 1;
    TWO = 2;
  }

  message NestedMessage {
    bool b = 1;
  }

  float f = 3;
  NestedMessage nm = 4;
  oneof oneval {
    int32 oneval_a = 5;
    int64 oneval_b = 6;
  }
  extend google.protobuf.MessageOptions {
    string my_option = 51234;
  }
  optional bytes b = 7;
  map<int32, string> m = 8;
}
"""


@pytest.fixture
def proto3_text() -> str:
    """Protobuf document covering every declaration kind."""
    return PROTO3_TEXT


@pytest.fixture(autouse=True)
def reset_console():
    """Drop any console a test installed so tests don't share output."""
    yield
    set_console(None)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo CLI logging setup so caplog sees protoutline records."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
