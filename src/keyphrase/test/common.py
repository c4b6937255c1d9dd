def make_words(count):
    # zero-padded, so sorting them lexicographically keeps index order
    return ["w%05d" % i for i in range(count)]
