# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from uriscope.exceptions import InvalidPercentSequence
from uriscope.form import decode_form, decode_form_once, encode_form, FormOptions
from uriscope.percent import DecodeOptions
from utest import utest, utest_exc


# encode_form.

utest('', encode_form, '')
utest('hello+world', encode_form, 'hello world')
utest('a%3Db%26c%3Dd', encode_form, 'a=b&c=d')
utest('AZaz09*-._', encode_form, 'AZaz09*-._')
utest('%7E', encode_form, '~')
utest('%2B', encode_form, '+')
utest('%25', encode_form, '%')
utest('%2520', encode_form, '%20') # Form encoding always encodes '%'.
utest('M%C3%BCnchen+stra%C3%9Fe', encode_form, 'München straße')
utest('%F0%9F%98%80', encode_form, '😀')
utest('a~b', encode_form, 'a~b', safe_set='~')
utest('a~b', encode_form, 'a~b', FormOptions(safe_set='~'))


# decode_form.

utest('', decode_form, '')
utest('hello world', decode_form, 'hello+world')
utest('hello world', decode_form, 'hello%20world')
utest('a=b&c=d', decode_form, 'a%3Db%26c%3Dd')
utest('ü', decode_form, '%C3%BC')
utest('Aü', decode_form, '%41%C3%BC')
utest('ÿ', decode_form, '%FF') # Not UTF-8; one character per byte.
utest('\xc3', decode_form, '%C3')
utest('+', decode_form, '%2B')
utest('%GG', decode_form, '%GG')
utest('a%', decode_form, 'a%')
utest('%2B', decode_form, '%252B')
utest('+', decode_form, '%252B', times=2)
utest(' ', decode_form, '%252B', until_stable=True) # The revealed '+' is decoded by the next pass.
utest(' ', decode_form, '%2520', DecodeOptions(until_stable=True, max_iterations=3))
utest_exc(InvalidPercentSequence('%GG', 0), decode_form, '%GG', strict=True)
utest_exc(InvalidPercentSequence('x+%4', 2), decode_form_once, 'x+%4', strict=True)

# Round trips, including non-ASCII text.
for s in ['', 'hello world', 'a=b&c=d', 'München straße', '100% +plus+', 'ğ😀€', '~!*()\'']:
  utest(s, decode_form, encode_form(s))
