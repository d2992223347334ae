def type_word(session, word):
    for c in word:
        session.handle_letter(c)

def guess(session, word):
    type_word(session, word)
    assert session.submit() is None, f"{word} was not accepted"
    return session.acknowledge_scoring()
