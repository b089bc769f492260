import json

from emojigen.index import EmojiIndex

GO_TEMPLATE = """\
// Copyright (c) 2015-present Mattermost, Inc. All Rights Reserved.
// See LICENSE.txt for license information.
// This file is automatically generated via `make emojis`. Do not modify it manually.

package model

var SystemEmojis = map[string]string{{{entries}}}
"""


def serialize_go_source(index: EmojiIndex) -> str:
    entries = [
        f"{json.dumps(alias, ensure_ascii=False)}: {json.dumps(emoji.file_name, ensure_ascii=False)}"
        for emoji in index.emojis
        for alias in emoji.short_names
    ]

    return GO_TEMPLATE.format(entries=", ".join(entries))
