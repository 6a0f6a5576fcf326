# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for dotted key resolution."""

import pytest

from genro_tinyparam import (
    InvalidArgumentError,
    NotALeafError,
    NotFoundError,
    ParamTree,
    PathNotFoundError,
    resolve,
)
from genro_tinyparam.resolver import split_key


@pytest.fixture()
def tree():
    return ParamTree({
        'name': 'box',
        'system': {
            'audio': {'volume': '50', 'mute': 'false'},
            'display': {'brightness': '75'},
        },
    })


class TestSplitKey:
    """Tests for split_key."""

    def test_split(self):
        """Test splitting on dots."""
        assert split_key('system.audio.volume') == ['system', 'audio', 'volume']
        assert split_key('name') == ['name']

    @pytest.mark.parametrize('key', [None, '', 42, b'system'])
    def test_invalid_keys(self, key):
        """Test non-string and empty keys are rejected."""
        with pytest.raises(InvalidArgumentError):
            split_key(key)

    @pytest.mark.parametrize('key', ['a..b', '.a', 'a.', '.'])
    def test_empty_segments(self, key):
        """Test keys with empty segments are rejected."""
        with pytest.raises(InvalidArgumentError, match="Empty segment"):
            split_key(key)


class TestResolve:
    """Tests for resolve."""

    def test_multi_segment(self, tree):
        """Test resolving a nested leaf."""
        node = resolve(tree, 'system.audio.volume')
        assert node.is_leaf
        assert node.value == '50'

    def test_single_segment(self, tree):
        """Test a key without dots is looked up under the root."""
        assert resolve(tree, 'name').value == 'box'

    def test_returns_live_node(self, tree):
        """Test the returned node belongs to the tree."""
        resolve(tree, 'system.display.brightness').value = '10'
        assert tree.as_dict()['system']['display']['brightness'] == '10'

    def test_missing_intermediate(self, tree):
        """Test a missing intermediate segment."""
        with pytest.raises(PathNotFoundError) as excinfo:
            resolve(tree, 'system.invalid.key')
        assert excinfo.value.segment == 'invalid'
        assert excinfo.value.key == 'system.invalid.key'

    def test_missing_terminal(self, tree):
        """Test a missing final segment."""
        with pytest.raises(PathNotFoundError) as excinfo:
            resolve(tree, 'system.audio.bass')
        assert excinfo.value.segment == 'bass'

    def test_missing_single_segment(self, tree):
        """Test a missing single-segment key."""
        with pytest.raises(PathNotFoundError):
            resolve(tree, 'volume')

    def test_terminal_object(self, tree):
        """Test a key ending on an object is not a leaf."""
        with pytest.raises(NotALeafError, match="is an object"):
            resolve(tree, 'system.audio')

    def test_single_segment_object(self, tree):
        """Test a single-segment key naming an object is not a leaf."""
        with pytest.raises(NotALeafError):
            resolve(tree, 'system')

    def test_descend_through_leaf(self, tree):
        """Test a key continuing past a leaf fails."""
        with pytest.raises(NotALeafError, match="is a leaf") as excinfo:
            resolve(tree, 'system.audio.volume.extra')
        assert excinfo.value.segment == 'volume'

    def test_errors_share_not_found_base(self, tree):
        """Test both resolution failures are NotFoundError and LookupError."""
        for key in ('system.nope', 'system.audio'):
            with pytest.raises(NotFoundError):
                resolve(tree, key)
            with pytest.raises(LookupError):
                resolve(tree, key)

    def test_empty_tree(self):
        """Test resolving against an empty tree."""
        with pytest.raises(PathNotFoundError):
            resolve(ParamTree(), 'a.b')
