"""Parentage util functions."""
import io
import json
import os

from .conf import CONF


def to_buffer(buffer_or_path):
    """
    Get a buffer from a buffer or a path.

    Parameters
    ----------
    buffer_or_path: typing.StringIO or str

    Returns
    -------
    path: str or None
        None if a buffer was given
    buffer: typing.StringIO
    """
    if isinstance(buffer_or_path, str):
        if not os.path.isfile(buffer_or_path):
            raise FileNotFoundError(f"no file found at given path: {buffer_or_path}")
        path = buffer_or_path
        with open(buffer_or_path, encoding=CONF.encoding) as f:
            buffer = io.StringIO(f.read())
    else:
        path = None
        buffer = buffer_or_path
    return path, buffer


def multi_mode_write(buffer_writer, string_writer, buffer_or_path=None):
    """
    Write to a buffer, a file path, or return a string.

    Parameters
    ----------
    buffer_writer: typing.Callable
        called with the buffer to write to
    string_writer: typing.Callable
        called without argument, must return the content as a string
    buffer_or_path: typing.StringIO or str or None

    Returns
    -------
    str or None
        str if buffer_or_path is None else None
    """
    # manage string
    if buffer_or_path is None:
        return string_writer()

    # manage path
    if isinstance(buffer_or_path, str):
        with open(buffer_or_path, "w", encoding=CONF.encoding) as f:
            buffer_writer(f)
        return None

    # manage buffer
    buffer_writer(buffer_or_path)
    return None


def json_data_to_json(json_data, buffer_or_path=None, indent=2):
    """
    Write a json-serializable dict to a string or file.

    Parameters
    ----------
    json_data: dict
    buffer_or_path: typing.StringIO or str or None
        buffer or file path to write the json to, if None (default) the function returns a json string
    indent: int or None
        indent parameter passed to json.dump

    Returns
    -------
    str or None
        str if buffer_or_path is None else None
    """
    return multi_mode_write(
        lambda buffer: json.dump(json_data, buffer, indent=indent),
        lambda: json.dumps(json_data, indent=indent),
        buffer_or_path=buffer_or_path
    )
