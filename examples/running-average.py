from resumable.core.coroutines import coroutine

STOP = object()

@coroutine
def averager(cell):
    total = count = 0
    while cell.value is not STOP:
        total += cell.value
        count += 1
        yield total / count

if __name__ == "__main__":
    avg = averager()
    for i in (10, 20, 30, 5):
        print('>', i, avg.resume(i))
    print('last:', avg.resume(STOP), 'alive:', avg.alive)
