"""
Unit Tests for Normalizer Service

These tests validate alias resolution and property normalization in
isolation, without any store.

Test Organization:
- TestAliasResolution: State and property alias lookups
- TestDisplayNames: Slug/display-name helpers
- TestNormalizeProperty: Canonical output for complete and partial records
- TestNormalizeLegacyShapes: Older record shapes still found in the database
"""

import copy

import pytest

from property_services.normalizer.aliases import (
    PROPERTY_ALIASES,
    STATE_ALIASES,
    ResolvedPath,
    resolve,
    resolve_property,
    resolve_state,
)
from property_services.normalizer.normalize import (
    CANONICAL_FIELDS,
    STAFF_ROLES,
    empty_property,
    normalize_property,
    slug_to_display_name,
    slugify_key,
    validate_canonical,
)


EMPTY_ROLE = {'name': '', 'email': ''}


# ============================================================================
# Alias Resolution Tests
# ============================================================================

class TestAliasResolution:
    """Tests for alias table lookups"""

    def test_state_alias_maps_to_store_name(self):
        assert resolve_state('newJersey') == 'New Jersey'
        assert resolve_state('delaware') == 'Delaware'
        assert resolve_state('pennsylvania') == 'Pennsylvania'

    def test_lowercased_state_names_round_trip(self):
        """State ids emitted by fetch_all resolve back to store names"""
        assert resolve_state('new jersey') == 'New Jersey'
        assert resolve_state('newjersey') == 'New Jersey'

    def test_property_alias_renames(self):
        assert resolve_property('landmark-glen-station') == 'landmark'
        assert resolve_property('the-flats') == 'flats'
        assert resolve_property('parc-at-cherry-hill') == 'parcCherry'
        assert resolve_property('lehigh-square-b') == 'lehigh-B'

    def test_property_alias_identity_entries_kept(self):
        assert PROPERTY_ALIASES['westover-pointe'] == 'westover-pointe'
        assert resolve_property('millcroft') == 'millcroft'

    @pytest.mark.parametrize("unknown", ['', 'texas', 'Some Place', 'no-such-slug', 'NEWJERSEY'])
    def test_unknown_ids_pass_through(self, unknown):
        assert resolve_state(unknown) == unknown
        assert resolve_property(unknown) == unknown

    @pytest.mark.parametrize("state_id", list(STATE_ALIASES) + ['', 'texas'])
    def test_state_resolution_is_idempotent(self, state_id):
        once = resolve_state(state_id)
        assert resolve_state(once) == once

    @pytest.mark.parametrize("slug", list(PROPERTY_ALIASES) + ['', 'unknown'])
    def test_property_resolution_is_idempotent(self, slug):
        once = resolve_property(slug)
        assert resolve_property(once) == once

    def test_resolve_pair(self):
        assert resolve('maryland', 'the-ridge') == ResolvedPath('Maryland', 'ridge')

    def test_resolve_without_slug(self):
        resolved = resolve('ohio')
        assert resolved.state == 'Ohio'
        assert resolved.property_key is None

    def test_alias_tables_are_read_only(self):
        with pytest.raises(TypeError):
            STATE_ALIASES['texas'] = 'Texas'  # type: ignore[index]
        with pytest.raises(TypeError):
            PROPERTY_ALIASES['x'] = 'y'  # type: ignore[index]


# ============================================================================
# Display Name Tests
# ============================================================================

class TestDisplayNames:
    """Tests for slug and display-name helpers"""

    @pytest.mark.parametrize("slug,expected", [
        ('sample-property', 'Sample Property'),
        ('westover-pointe', 'Westover Pointe'),
        ('1869west', '1869west'),
        ('parcCherry', 'ParcCherry'),
        ('lehigh-B', 'Lehigh B'),
        ('', ''),
    ])
    def test_slug_to_display_name(self, slug, expected):
        assert slug_to_display_name(slug) == expected

    @pytest.mark.parametrize("key,expected", [
        ('Aspen Court', 'aspen-court'),
        ('The  Meridian\tNorth', 'the-meridian-north'),
        ('westover-pointe', 'westover-pointe'),
        ('parcCherry', 'parccherry'),
    ])
    def test_slugify_key(self, key, expected):
        assert slugify_key(key) == expected


# ============================================================================
# Normalize Property Tests
# ============================================================================

class TestNormalizeProperty:
    """Tests for canonical property normalization"""

    def test_empty_record_yields_all_defaults(self):
        prop = normalize_property({}, 'sample-property', 'sample-property')

        assert prop == {
            'id': 'sample-property',
            'name': 'Sample Property',
            'address': '',
            'description': '',
            'units': '',
            'yearBuilt': '',
            'renovated': '',
            'amenities': [],
            'contact': {'manager': '', 'phone': '', 'email': ''},
            'staff': {role: dict(EMPTY_ROLE) for role in STAFF_ROLES},
            'images': ['/logo.png'],
        }

    def test_staff_roles_in_fixed_order(self):
        prop = normalize_property({'pm': {'name': 'A'}, 'vp': {'name': 'B'}}, 'x', 'x')
        assert tuple(prop['staff']) == ('vp', 'rem', 'rsd', 'ds', 'pm')

    def test_full_record(self, sample_raw_property):
        prop = normalize_property(sample_raw_property, 'westover-pointe', 'westover-pointe')

        assert prop['name'] == 'Westover Pointe'
        assert prop['address'] == '500 Westover Dr, New Castle, DE 19720'
        assert prop['units'] == '216'
        assert prop['yearBuilt'] == '1969'
        assert prop['renovated'] == '2018'
        assert prop['amenities'] == ['Swimming Pool', 'Fitness Center']
        assert prop['images'] == ['/images/westover-1.jpg', '/images/westover-2.jpg']
        assert prop['contact'] == {
            'manager': 'Sarah Thompson',
            'phone': '(302) 555-0100',
            'email': 'sarah.thompson@example.com',
        }
        assert prop['staff']['rem'] == {'name': 'Robert Johnson', 'email': 'robert.johnson@example.com'}

    def test_property_manager_becomes_contact(self):
        pm = {'name': 'Sarah Thompson', 'email': 'sarah.thompson@example.com'}
        prop = normalize_property({'pm': pm}, 'x', 'x')

        assert prop['contact']['manager'] == 'Sarah Thompson'
        assert prop['contact']['email'] == 'sarah.thompson@example.com'
        assert prop['staff']['pm'] == pm
        for role in ('vp', 'rem', 'rsd', 'ds'):
            assert prop['staff'][role] == EMPTY_ROLE

    def test_role_defaults_field_by_field(self):
        prop = normalize_property({'vp': {'name': 'Jane Smith'}, 'ds': {'email': 'ds@example.com'}}, 'x', 'x')

        assert prop['staff']['vp'] == {'name': 'Jane Smith', 'email': ''}
        assert prop['staff']['ds'] == {'name': '', 'email': 'ds@example.com'}

    def test_record_name_wins_over_hint(self):
        prop = normalize_property({'name': 'The Flats'}, 'the-flats', 'flats')
        assert prop['name'] == 'The Flats'
        assert prop['id'] == 'the-flats'

    def test_units_are_strings(self):
        assert normalize_property({'unit': 216}, 'x', 'x')['units'] == '216'
        assert normalize_property({'unit': '190'}, 'x', 'x')['units'] == '190'
        assert normalize_property({'yearBuilt': 1985}, 'x', 'x')['yearBuilt'] == '1985'

    @pytest.mark.parametrize("images", [None, [], {}])
    def test_missing_or_empty_images_use_placeholder(self, images):
        prop = normalize_property({'images': images}, 'x', 'x')
        assert prop['images'] == ['/logo.png']

    def test_blank_strings_count_as_absent(self):
        prop = normalize_property({'name': '   ', 'address': ''}, 'iron-ridge', 'iron-ridge')
        assert prop['name'] == 'Iron Ridge'
        assert prop['address'] == ''

    def test_does_not_mutate_input(self, sample_raw_property):
        original = copy.deepcopy(sample_raw_property)
        prop = normalize_property(sample_raw_property, 'x', 'x')

        prop['amenities'].append('Sauna')
        prop['staff']['pm']['name'] = 'Changed'

        assert sample_raw_property == original

    @pytest.mark.parametrize("raw", [
        {},
        {'unit': None, 'pm': None},
        {'vp': {}, 'rem': {'name': None}},
        {'amenities': None, 'images': None, 'phone': None},
        {'unrelated': 'value'},
    ])
    def test_every_canonical_field_present(self, raw):
        prop = normalize_property(raw, 'id', 'name')
        assert set(prop) == set(CANONICAL_FIELDS)
        assert validate_canonical(prop)

    def test_empty_property_helper(self):
        assert empty_property('sample-property', 'sample-property') == normalize_property(
            {}, 'sample-property', 'sample-property'
        )


# ============================================================================
# Legacy Record Shape Tests
# ============================================================================

class TestNormalizeLegacyShapes:
    """Tests for record shapes left over from the static-page era"""

    def test_bare_string_role_is_a_name(self):
        prop = normalize_property({'pm': 'Sarah Thompson'}, 'x', 'x')
        assert prop['staff']['pm'] == {'name': 'Sarah Thompson', 'email': ''}
        assert prop['contact']['manager'] == 'Sarah Thompson'

    def test_sparse_array_read_in_index_order(self):
        prop = normalize_property({'amenities': {'2': 'Gym', '0': 'Pool', '10': 'Sauna'}}, 'x', 'x')
        assert prop['amenities'] == ['Pool', 'Gym', 'Sauna']

    def test_non_ascii_digit_keys_sort_as_text(self):
        prop = normalize_property({'amenities': {'1': 'Gym', '\u00b2': 'Sauna', '0': 'Pool'}}, 'x', 'x')
        assert prop['amenities'] == ['Pool', 'Gym', 'Sauna']

    def test_non_mapping_record_uses_defaults(self):
        prop = normalize_property('not a record', 'x', 'x')
        assert validate_canonical(prop)
        assert prop['address'] == ''

    def test_none_record_uses_defaults(self):
        assert normalize_property(None, 'x', 'x') == empty_property('x', 'x')


class TestValidateCanonical:
    """Tests for the canonical shape check"""

    def test_rejects_missing_field(self):
        prop = empty_property('x', 'x')
        del prop['images']
        assert validate_canonical(prop) is False

    def test_rejects_wrong_role_order(self):
        prop = empty_property('x', 'x')
        prop['staff'] = dict(reversed(list(prop['staff'].items())))
        assert validate_canonical(prop) is False

    def test_rejects_non_mapping(self):
        assert validate_canonical(None) is False
        assert validate_canonical([]) is False
