# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

SAMPLE_UNICODE_DATA = '''\
# emoji-test.txt
# Version: 15.1

# group: Smileys & Emotion

# subgroup: face-concerned
2639 FE0F                                              ; fully-qualified     # ☹️ E0.7 frowning face
2639                                                   ; unqualified         # ☹ E0.7 frowning face
1F641                                                  ; fully-qualified     # 🙁 E1.0 slightly frowning face

# Smileys & Emotion subtotal:		3

# group: People & Body

# subgroup: hands
1F64C                                                  ; fully-qualified     # 🙌 E0.6 raising hands
1F64C 1F3FB                                            ; fully-qualified     # 🙌🏻 E1.0 raising hands: light skin tone
1F64C 1F3FC                                            ; fully-qualified     # 🙌🏼 E1.0 raising hands: medium-light skin tone
1F64C 1F3FD                                            ; fully-qualified     # 🙌🏽 E1.0 raising hands: medium skin tone
1F64C 1F3FE                                            ; fully-qualified     # 🙌🏾 E1.0 raising hands: medium-dark skin tone
1F64C 1F3FF                                            ; fully-qualified     # 🙌🏿 E1.0 raising hands: dark skin tone

# group: Component

# subgroup: skin-tone
1F3FB                                                  ; component           # 🏻 E1.0 light skin tone

# group: Flags

# subgroup: flag
1F3C1                                                  ; fully-qualified     # 🏁 E0.6 chequered flag

#EOF
'''

# An incomplete two person family
SAMPLE_HANDSHAKE_DATA = '''\
# group: People & Body

# subgroup: hands
1F91D                                                  ; fully-qualified     # 🤝 E3.0 handshake
1F91D 1F3FB                                            ; fully-qualified     # 🤝🏻 E14.0 handshake: light skin tone
1FAF1 1F3FB 200D 1FAF2 1F3FC                           ; fully-qualified     # 🫱🏻‍🫲🏼 E14.0 handshake: light skin tone, medium-light skin tone
1F91D 1F3FF                                            ; fully-qualified     # 🤝🏿 E14.0 handshake: dark skin tone
'''

SAMPLE_GITHUB_DATA = '''\
[
  {"emoji": "☹", "aliases": ["frowning_face"]},
  {"emoji": "🙌", "aliases": ["raised_hands", "praise"]},
  {"emoji": "🏁", "aliases": ["checkered_flag"]},
  {"emoji": "🏻", "aliases": ["tone1"]}
]
'''

FROWNING_FACE = '\u2639\uFE0F'
FROWNING_FACE_UNQUALIFIED = '\u2639'
RAISING_HANDS = '\U0001F64C'
HANDSHAKE = '\U0001F91D'
HANDSHAKE_MIXED = '\U0001FAF1\U0001F3FB\u200D\U0001FAF2\U0001F3FC'
CHEQUERED_FLAG = '\U0001F3C1'
