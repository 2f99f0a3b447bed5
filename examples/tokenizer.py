from resumable.core.coroutines import Coroutine, ResumeOnCompletedComputation

def words(cell):
    "Feed one character per resume; yields the word finished so far or None."
    buf = []
    while cell.value:
        if cell.value.isspace():
            yield ''.join(buf) or None
            buf = []
        else:
            buf.append(cell.value)
            yield None
    if buf:
        yield ''.join(buf)

if __name__ == "__main__":
    co = Coroutine(words)
    for ch in "hello cooperative world":
        word = co.resume(ch)
        if word:
            print(word)
    print(co.resume(''))
    co.resume('')
    try:
        co.resume('x')
    except ResumeOnCompletedComputation as e:
        print(e)
