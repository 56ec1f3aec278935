import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from css_modules.naming import (
    CAMEL_CASE, KEBAB_CASE, camel_case, get_convention, kebab_case, split_words
)

def test_split_words():
    assert split_words('myClass-name') == ['my', 'Class', 'name']
    assert split_words('btn__primary--active') == ['btn', 'primary', 'active']
    assert split_words('XMLHttpRequest') == ['XML', 'Http', 'Request']
    assert split_words('col2') == ['col', '2']

def test_camel_case():
    assert camel_case('myClass-name') == 'myClassName'
    assert camel_case('card') == 'card'
    assert camel_case('card-header') == 'cardHeader'
    assert camel_case('btn_primary') == 'btnPrimary'
    assert camel_case('TITLE') == 'title'
    assert camel_case('--') == ''

def test_kebab_case():
    assert kebab_case('myClass-name') == 'my-class-name'
    assert kebab_case('cardHeader') == 'card-header'
    assert kebab_case('btn_primary') == 'btn-primary'
    assert kebab_case('already-kebab') == 'already-kebab'

def test_convention_format():
    assert CAMEL_CASE.format('myClass-name') == 'myClassName'
    assert KEBAB_CASE.format('myClass-name') == "'my-class-name'"

def test_convention_locals_setting():
    assert CAMEL_CASE.locals_convention == 'camelCaseOnly'
    assert KEBAB_CASE.locals_convention == 'dashesOnly'

def test_get_convention():
    assert get_convention('camelCase') is CAMEL_CASE
    assert get_convention('kebab-case') is KEBAB_CASE
    with pytest.raises(ValueError):
        get_convention('snake_case')

def test_ordinals_stay_one_word():
    assert split_words('col-1st') == ['col', '1st']
    assert split_words('row_2ND') == ['row', '2ND']
    assert split_words('grid-4th-item') == ['grid', '4th', 'item']
    assert camel_case('col-1st') == 'col1st'
    assert camel_case('grid-4th-item') == 'grid4thItem'
    assert kebab_case('col1st') == 'col-1st'

def test_digits_that_are_not_ordinals():
    assert split_words('col-11th') == ['col', '11', 'th']
    assert split_words('span4three') == ['span', '4', 'three']
