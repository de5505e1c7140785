"""Go sources shared by the field model tests."""

MODEL_GO = """
package model

import (
\t"time"

\text "example.com/ext"
)

type Status string

type Priority int32

type Ratio float64

type Flag bool

type Raw byte

type Inner struct {
\tID int
}

type Box[T any] struct {
\tValue T
}

type Person struct {
\tage      int
\tName     *string
\tTags     []string
\tMeta     map[string]int
\tScore    float64
\tActive   bool
\tInitial  byte
\tLetter   rune
\tWeight   complex128
\tStatus   Status
\tStatusP  *Status
\tPriority Priority
\tRatio    Ratio
\tFlag     Flag
\tRaw      Raw
\tInner    Inner
\tInnerP   *Inner
\tWhen     time.Time
\tWhenP    *time.Time
\tExt      ext.Thing
\tBoxed    Box[int]
\tGrid     [3]int
\tNested   map[Status][]Priority
\tCallback func()
\tx, y     uint16
}
"""
