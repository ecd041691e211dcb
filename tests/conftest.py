import pytest

FOO_SOURCE = """\
import { thing } from "./thing";

/* SCHEMA */
interface Foo {
\ta: string;
\tb: {
\t\tc: number;
\t};
}
/* END SCHEMA */

export const x = 1;
"""

DEEP_SOURCE = """\
/* SCHEMA */
interface Deep {
    id: string;
    outer: {
        [key: string]: number;
        middle: {
            inner: {
                leaf: boolean;
            };
            count: number;
        };
    };
    [key: string]: string;
}
/* END SCHEMA */
"""


@pytest.fixture()
def foo_source() -> str:
    return FOO_SOURCE


@pytest.fixture()
def deep_source() -> str:
    return DEEP_SOURCE


@pytest.fixture()
def project(tmp_path, foo_source, deep_source):
    """A small project tree with marked declarations in two files."""
    src = tmp_path / "src"
    (src / "models").mkdir(parents=True)
    (src / "foo.ts").write_text(foo_source)
    (src / "models" / "deep.ts").write_text(deep_source)
    (src / "notes.md").write_text(foo_source.replace("Foo", "Ignored"))
    return tmp_path
